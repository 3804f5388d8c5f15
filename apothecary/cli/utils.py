"""Output helpers shared by the apothecary commands.

Every command writes through one ``Output``. Without ``--json`` it prints
Rich markup as it goes; with ``--json`` it collects everything into a single
document that is printed by ``finish()``.

Example:
    out = Output(console=console, json_mode=get_json_mode())
    out.totals_table(result.totals)
    out.recipe_card(result.recipe, headline="Crafted Moonpetal Tonic")
    raise typer.Exit(out.finish())
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..core.models import AttributeTotals, Recipe


class ExitCode:
    """Process exit codes.

        0 = Success
        1 = Validation error (bad option or config value)
        2 = Selection error (ingredients cannot be crafted)
        3 = Data error (data files missing or invalid)
        4 = No result (nothing to show for the discipline or slot)
    """

    SUCCESS = 0
    VALIDATION_ERROR = 1
    SELECTION_ERROR = 2
    DATA_ERROR = 3
    NO_RESULT = 4


class Output(BaseModel):
    """Human or JSON output for a single command invocation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console
    json_mode: bool = False

    _data: dict[str, Any] = PrivateAttr(default_factory=dict)
    _exit_code: int = PrivateAttr(default=ExitCode.SUCCESS)

    def model_post_init(self, __context: Any) -> None:
        self._data = {"status": "success", "warnings": [], "errors": []}

    def _notice(self, bucket: str, icon: str, message: str, suggestion: str | None) -> None:
        if self.json_mode:
            entry: dict[str, Any] = {"message": message}
            if suggestion:
                entry["suggestion"] = suggestion
            self._data[bucket].append(entry)
            return
        self.console.print(f"{icon} {message}")
        if suggestion:
            self.console.print(f"  [dim]→ {suggestion}[/dim]")

    def success(self, message: str, **data: Any) -> None:
        if self.json_mode:
            self._data.update(data)
        else:
            self.console.print(f"[green]✓[/green] {message}")

    def warning(self, message: str, *, suggestion: str | None = None) -> None:
        self._notice("warnings", "[yellow]⚠[/yellow]", message, suggestion)

    def error(
        self,
        message: str,
        *,
        suggestion: str | None = None,
        exit_code: int = ExitCode.VALIDATION_ERROR,
    ) -> None:
        """Record an error; the last one recorded decides the exit code."""
        self._exit_code = exit_code
        self._data["status"] = "error"
        self._notice("errors", "[red]✗[/red]", message, suggestion)

    def text(self, message: str) -> None:
        if not self.json_mode:
            self.console.print(message)

    def blank(self) -> None:
        if not self.json_mode:
            self.console.print()

    def table(
        self,
        title: str,
        columns: list[str],
        rows: list[list[str]],
        *,
        data_key: str | None = None,
    ) -> None:
        """Print a Rich table, or store rows as dicts keyed by column name.

        The JSON key defaults to the title in snake_case.
        """
        if self.json_mode:
            key = data_key or title.lower().replace(" ", "_")
            self._data[key] = [dict(zip(columns, row)) for row in rows]
            return

        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column(columns[0])
        for col in columns[1:]:
            table.add_column(col, justify="right")
        for row in rows:
            table.add_row(*row)
        self.console.print(table)

    def totals_table(self, totals: AttributeTotals) -> None:
        """Attribute totals of a craft, one row per attribute."""
        self.table(
            "Totals",
            ["Attribute", "Total"],
            [[name.capitalize(), str(value)] for name, value in totals.as_dict().items()],
            data_key="totals",
        )

    def recipe_card(self, recipe: Recipe, *, headline: str) -> None:
        """Headline followed by the recipe's rarity, effect and description."""
        self.success(headline)
        for label, value in (("Rarity", recipe.rarity), ("Effect", recipe.effect)):
            if value:
                self.text(f"  {label}: {value}")
        if recipe.description:
            self.text(f"  [dim]{recipe.description}[/dim]")

    def set_data(self, key: str, value: Any) -> None:
        self._data[key] = value

    def finish(self) -> int:
        """Print the collected JSON document (JSON mode) and return the exit code."""
        if self.json_mode:
            self._data["exit_code"] = self._exit_code
            print(json.dumps(self._data, indent=2, default=str))
        return self._exit_code


def setup_logging(console: Console, verbose: bool = False, debug: bool = False):
    """Route apothecary logs through Rich at the requested verbosity."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )
    logging.getLogger("apothecary").setLevel(level)
