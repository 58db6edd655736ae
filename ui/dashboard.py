"""SocioAI Terminal Dashboard - Main UI Entry Point"""

import sys
from datetime import date
from typing import Any, Callable, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt
from rich.table import Table
from rich.text import Text
from rich.align import Align

from socioai.app import SocioAIApp
from socioai.auth.guard import LOGIN_VIEW
from socioai.utils.exceptions import SocioAIError

console = Console()

HOME_MENU = [
    ("1", "Categorias", "categoria"),
    ("2", "Lançamentos", "lancamento"),
    ("3", "Metas", "meta"),
    ("4", "Relatório", "relatorio"),
    ("5", "Usuários", "user"),
]


class RichNotifier:
    """Toast replacement: one coloured line per message"""

    def success(self, message: str) -> None:
        console.print(f"[bold green]✓ {message}[/bold green]")

    def error(self, message: str) -> None:
        console.print(f"[bold red]✗ {message}[/bold red]")


class RichConfirmer:
    def confirm(self, message: str) -> bool:
        return Confirm.ask(message, default=False)


def _optional(prompt: str, default: Any = None) -> Optional[str]:
    value = Prompt.ask(prompt, default="" if default is None else str(default))
    return value.strip() or None


def _optional_date(prompt: str, default: Optional[date] = None) -> Optional[date]:
    value = _optional(f"{prompt} (AAAA-MM-DD)", default)
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        console.print("[red]Data inválida, campo ignorado[/red]")
        return None


class SocioAIDashboard:
    """Main dashboard class for the SocioAI UI. Also acts as the navigator."""

    def __init__(self, app: Optional[SocioAIApp] = None):
        self.app = app or SocioAIApp()
        self.view = LOGIN_VIEW
        self.running = True

    # Navigator port
    def navigate(self, view: str) -> None:
        self.view = view

    def initialize_app(self) -> bool:
        try:
            console.print("[bold blue]Initializing SocioAI...[/bold blue]")
            self.app.initialize(RichNotifier(), self, RichConfirmer())
            return True
        except SocioAIError as e:
            console.print(f"[bold red]✗ Initialization failed: {e}[/bold red]\n")
            return False

    def run(self) -> None:
        if not self.initialize_app():
            return
        if self.app.session.has_token():
            self.view = "home"
        pages = {
            "login": self.login_page,
            "signup": self.signup_page,
            "home": self.home_page,
            "categoria": self.categoria_page,
            "lancamento": self.lancamento_page,
            "meta": self.meta_page,
            "user": self.user_page,
            "relatorio": self.relatorio_page,
        }
        while self.running:
            view = self.view
            if not self.app.guard.can_enter(view):
                continue
            console.print()
            pages[view]()

    def _header(self, title: str) -> None:
        console.print(Panel(Align.center(Text(title, style="bold white")), style="bold blue", box=box.DOUBLE))

    def _pick(self, rows: Sequence[Any], label: str) -> Optional[Any]:
        if not rows:
            console.print("[yellow]Nenhum registro.[/yellow]")
            return None
        idx = IntPrompt.ask(f"Número do {label}", default=1)
        if 1 <= idx <= len(rows):
            return rows[idx - 1]
        console.print("[red]Invalid selection[/red]")
        return None

    def _table(self, title: str, columns: List[str], rows: List[List[str]]) -> None:
        table = Table(title=title, box=box.ROUNDED, show_header=True)
        table.add_column("#", style="cyan", width=4)
        for column in columns:
            table.add_column(column)
        for idx, row in enumerate(rows, 1):
            table.add_row(str(idx), *row)
        console.print(table)

    def _crud_menu(self, on_new: Optional[Callable[[], None]], on_edit: Callable[[], None], on_delete: Callable[[], None], on_reload: Callable[[], None]) -> None:
        choices = ["e", "d", "r", "v"] + (["n"] if on_new else [])
        hint = "[N]ovo " if on_new else ""
        choice = Prompt.ask(f"{hint}[E]ditar [D]eletar [R]ecarregar [V]oltar", choices=choices, default="v")
        if choice == "n":
            on_new()
        elif choice == "e":
            on_edit()
        elif choice == "d":
            on_delete()
        elif choice == "r":
            on_reload()
        else:
            self.navigate("home")

    def login_page(self) -> None:
        self._header("SocioAI - Login")
        choice = Prompt.ask("[L]ogin, [C]adastro ou [S]air", choices=["l", "c", "s"], default="l")
        controller = self.app.controller("login")
        if choice == "s":
            self.running = False
            return
        if choice == "c":
            controller.go_to_signup()
            return
        email = Prompt.ask("Email")
        password = Prompt.ask("Senha", password=True)
        controller.submit(email, password)

    def signup_page(self) -> None:
        self._header("SocioAI - Cadastro")
        controller = self.app.controller("signup")
        email = Prompt.ask("Email")
        password = Prompt.ask("Senha", password=True)
        password_confirm = Prompt.ask("Confirme a senha", password=True)
        if not controller.submit(email, password, password_confirm):
            if not Confirm.ask("Tentar novamente?", default=True):
                controller.go_to_login()

    def home_page(self) -> None:
        controller = self.app.controller("home")
        self._header(f"Olá, {controller.username}")
        menu = "\n".join(f"[{key}] {label}" for key, label, _ in HOME_MENU) + "\n[S] Sair (logout)"
        console.print(Panel(menu, title="Menu", border_style="cyan"))
        choice = Prompt.ask("Select option", choices=[key for key, _, _ in HOME_MENU] + ["s"], default="1")
        if choice == "s":
            controller.logout()
            return
        for key, _, view in HOME_MENU:
            if key == choice:
                self.navigate(view)

    def categoria_page(self) -> None:
        controller = self.app.controller("categoria")
        self._header("Categorias")
        controller.load()
        self._table("Categorias", ["Nome", "Metas"], [[c.nome, str(len(c.metas))] for c in controller.items])

        def edit():
            record = self._pick(controller.items, "registro")
            if record is None:
                return
            draft = controller.start_edit(record)
            nome = _optional("Nome", draft.nome)
            if nome:
                draft.nome = nome
                controller.save_edit()
            else:
                controller.cancel_edit()

        def delete():
            record = self._pick(controller.items, "registro")
            if record is not None:
                controller.delete(record)

        self._crud_menu(lambda: controller.create(_optional("Nome")), edit, delete, controller.load)

    def lancamento_page(self) -> None:
        controller = self.app.controller("lancamento")
        self._header("Lançamentos")
        controller.on_init()
        self._table(
            "Lançamentos",
            ["Descrição", "Valor", "Data", "Meta"],
            [[l.descricao, f"{l.valor:.2f}", l.data_criacao or "", controller.meta_name(l.meta)] for l in controller.items],
        )

        def new():
            self._table("Metas", ["Id", "Descrição"], [[str(m.id), m.descricao] for m in controller.metas.items])
            descricao = _optional("Descrição")
            valor = FloatPrompt.ask("Valor", default=0.0)
            meta = IntPrompt.ask("Id da meta", default=0)
            controller.create(descricao, valor, meta)

        def edit():
            record = self._pick(controller.items, "registro")
            if record is None:
                return
            draft = controller.start_edit(record)
            draft.descricao = _optional("Descrição", draft.descricao) or draft.descricao
            draft.valor = FloatPrompt.ask("Valor", default=draft.valor)
            controller.save_edit()

        def delete():
            record = self._pick(controller.items, "registro")
            if record is not None:
                controller.delete(record)

        self._crud_menu(new, edit, delete, controller.on_init)

    def meta_page(self) -> None:
        controller = self.app.controller("meta")
        self._header("Metas")
        controller.on_init()
        self._table(
            "Metas",
            ["Descrição", "Valor atual", "Início", "Fim", "Categoria"],
            [
                [m.descricao, f"{m.valor_atual or 0:.2f}", m.data_inicio or "", m.data_fim or "", controller.category_name(m.categoria)]
                for m in controller.items
            ],
        )

        def new():
            self._table("Categorias", ["Id", "Nome"], [[str(c.id), c.nome] for c in controller.categorias.items])
            descricao = _optional("Descrição")
            categoria = IntPrompt.ask("Id da categoria", default=0)
            valor_atual = FloatPrompt.ask("Valor atual", default=0.0)
            controller.create(descricao, categoria, valor_atual, _optional_date("Início"), _optional_date("Fim"))

        def edit():
            record = self._pick(controller.items, "registro")
            if record is None:
                return
            draft = controller.start_edit(record)
            draft.descricao = _optional("Descrição", draft.descricao) or draft.descricao
            draft.valor_atual = FloatPrompt.ask("Valor atual", default=draft.valor_atual or 0.0)
            data_fim = _optional_date("Fim", draft.data_fim)
            if data_fim is not None:
                draft.data_fim = data_fim
            controller.save_edit()

        def delete():
            record = self._pick(controller.items, "registro")
            if record is not None:
                controller.delete(record)

        self._crud_menu(new, edit, delete, controller.on_init)

    def user_page(self) -> None:
        controller = self.app.controller("user")
        self._header("Usuários")
        controller.on_init()
        self._table("Usuários", ["Email", "Papel"], [[u.username, controller.role_name(u.role_id)] for u in controller.items])

        def edit():
            record = self._pick(controller.items, "registro")
            if record is None:
                return
            draft = controller.start_edit(record)
            draft.password = Prompt.ask("Nova senha (vazio mantém a atual)", password=True, default="")
            draft.role_id = IntPrompt.ask("Id do papel", default=draft.role_id or 0)
            controller.save_edit()

        def delete():
            record = self._pick(controller.items, "registro")
            if record is not None:
                controller.delete(record)

        self._crud_menu(None, edit, delete, controller.on_init)

    def relatorio_page(self) -> None:
        controller = self.app.controller("relatorio")
        self._header("Relatório")
        with console.status("Carregando relatório..."):
            controller.load_totals()
            controller.load_cash_flow()
        chart = controller.chart_data()
        self._table("Distribuição de Valores por Categoria", ["Categoria", "Valor Total"],
                    [[label, f"{value:.2f}"] for label, value in zip(chart["labels"], chart["values"])])
        self._table(
            "Fluxo de caixa",
            ["Período", "Receitas", "Despesas", "Saldo"],
            [
                [f.periodo, f"{f.total_receitas:.2f}", f"{f.total_despesas:.2f}", f"{f.saldo_liquido:.2f}"]
                for f in controller.cash_flow.items
            ],
        )
        Prompt.ask("Enter para voltar", default="")
        self.navigate("home")


def main() -> None:
    try:
        SocioAIDashboard().run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Goodbye![/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
