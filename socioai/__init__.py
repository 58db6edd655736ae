"""SocioAI - personal finance client for the SocioAI REST backend"""

__version__ = "1.0.0"
