"""Almanac command: browse a discipline's recipe slots."""

from pathlib import Path

import typer

from ...config import get_config
from ...core.models import Discipline, QualityCategory
from ...crafting import SLOTS_PER_TIER, build_almanac, result_for_recipe
from ...storage import DataLoadError, load_data_dir
from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output

UNKNOWN_LABEL = "???"


@app.command("almanac")
def almanac_command(
    discipline: str | None = typer.Option(
        None,
        "--discipline",
        "-d",
        help="Herbalism, Alchemy or Poison (defaults to config)",
    ),
    reveal: bool = typer.Option(
        False, "--reveal", help="Show undiscovered recipe names (DM view)"
    ),
    quality: str | None = typer.Option(
        None, "--quality", "-q", help="Show one entry: quality (Potency, Resonance, Entropy)"
    ),
    slot: int | None = typer.Option(
        None, "--slot", "-s", help="Show one entry: slot number 1-15"
    ),
    data_dir: Path | None = typer.Option(
        None, "--data-dir", help="Directory with ingredients and recipe files"
    ),
):
    """
    List recipe slots per quality for a discipline.

    Undiscovered recipes are shown as ??? unless --reveal is given.

    Examples:
        apothecary almanac -d Alchemy
        apothecary almanac -d Poison -q Entropy -s 4
    """
    config = get_config()
    out = Output(console=console, json_mode=get_json_mode())

    discipline_name = discipline or config.defaults.discipline
    selected_discipline = Discipline.parse(discipline_name)
    if selected_discipline is None:
        out.error(
            f"Unknown discipline: {discipline_name}",
            suggestion=f"Choose one of: {', '.join(d.value for d in Discipline)}",
        )
        raise typer.Exit(out.finish())

    try:
        data = load_data_dir(data_dir or config.data_dir_resolved)
    except DataLoadError as e:
        out.error(str(e), exit_code=ExitCode.DATA_ERROR)
        raise typer.Exit(out.finish())

    almanac = build_almanac(data.catalog(selected_discipline))

    if quality is not None or slot is not None:
        _show_entry(out, almanac, quality, slot, reveal)
        raise typer.Exit(out.finish())

    out.set_data("discipline", selected_discipline.value)
    for category, entries in almanac.items():
        rows = []
        for number in range(1, SLOTS_PER_TIER + 1):
            recipe = entries.get(number)
            if recipe is None:
                rows.append([str(number), "", ""])
            elif recipe.discovered or reveal:
                rows.append([str(number), recipe.name, recipe.rarity])
            else:
                rows.append([str(number), UNKNOWN_LABEL, ""])
        out.table(
            f"{selected_discipline.value} {category.value}",
            ["Slot", "Recipe", "Rarity"],
            rows,
            data_key=category.value.lower(),
        )

    raise typer.Exit(out.finish())


def _show_entry(out: Output, almanac, quality: str | None, slot: int | None, reveal: bool):
    """Display the result card for one almanac slot."""
    category = QualityCategory.normalize(quality)
    if category is None or slot is None:
        out.error(
            "Both --quality and --slot are required to show an entry",
            suggestion="e.g. --quality Potency --slot 3",
        )
        return

    recipe = almanac[category].get(slot)
    if recipe is None:
        out.error(f"No {category.value} recipe in slot {slot}", exit_code=ExitCode.NO_RESULT)
        return
    if not (recipe.discovered or reveal):
        out.error(
            f"{category.value} slot {slot} has not been discovered yet",
            exit_code=ExitCode.NO_RESULT,
        )
        return

    result = result_for_recipe(recipe)
    out.set_data("result", result.model_dump(mode="json"))
    out.recipe_card(recipe, headline=f"{recipe.name} ({category.value} #{result.roll + 1})")
