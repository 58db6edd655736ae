import os
import sys
import traceback
from pathlib import Path

from dotenv import load_dotenv


def _unhandled_exception(exc_type, exc_value, exc_tb):
    """Print unhandled exceptions before the process exits."""
    if exc_type is KeyboardInterrupt:
        sys.__excepthook__(exc_type, exc_value, exc_tb)
        return
    lines = traceback.format_exception(exc_type, exc_value, exc_tb)
    print("Unhandled exception:\n" + "".join(lines), file=sys.stderr, flush=True)
    sys.__excepthook__(exc_type, exc_value, exc_tb)


if __name__ == "__main__":
    """
    Entry point for SocioAI.
    Starts the terminal dashboard against the configured backend.
    """
    env_path = Path(__file__).resolve().parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    sys.excepthook = _unhandled_exception

    print(f"Backend: {os.getenv('SOCIOAI_API_URL', 'from data/settings.yaml')}")
    print("Press CTRL+C to quit")

    from ui.dashboard import main

    main()
