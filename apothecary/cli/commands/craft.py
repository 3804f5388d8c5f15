"""Craft command: combine three ingredients under a discipline."""

import random
from pathlib import Path

import typer

from ...config import get_config
from ...core.models import CraftMode, Discipline
from ...crafting import SelectionError, is_tie, resolve, validate_selection
from ...storage import DataLoadError, load_data_dir
from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output, setup_logging


@app.command("craft")
def craft_command(
    ingredients: list[str] = typer.Argument(
        ...,
        help="Names of the three ingredients to combine",
    ),
    discipline: str | None = typer.Option(
        None,
        "--discipline",
        "-d",
        help="Herbalism, Alchemy or Poison (defaults to config)",
    ),
    mode: str | None = typer.Option(
        None,
        "--mode",
        "-m",
        help="deterministic or random (defaults to config)",
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Random seed for reproducible random-mode rolls"
    ),
    data_dir: Path | None = typer.Option(
        None, "--data-dir", help="Directory with ingredients and recipe files"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show info logs"),
    debug: bool = typer.Option(False, "--debug", help="Show debug logs"),
):
    """
    Resolve one crafting attempt and show the resulting recipe.

    EXIT CODES:
        0 = Success
        1 = Invalid discipline or mode
        2 = Invalid ingredient selection
        3 = Data files missing or invalid
        4 = No recipe available

    Examples:
        apothecary craft "Moonpetal" "Ashroot" "Gloomcap" -d Herbalism
        apothecary craft Moonpetal Ashroot Gloomcap -d Poison -m random --seed 7
    """
    setup_logging(console, verbose=verbose, debug=debug)
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

    mode_name = mode or config.defaults.mode
    if mode_name not in {m.value for m in CraftMode}:
        out.error(
            f"Unknown mode: {mode_name}",
            suggestion="Choose deterministic or random",
        )
        raise typer.Exit(out.finish())

    if seed is None:
        seed = config.defaults.seed
    rng = random.Random(seed) if seed is not None else None

    try:
        data = load_data_dir(data_dir or config.data_dir_resolved)
    except DataLoadError as e:
        out.error(str(e), exit_code=ExitCode.DATA_ERROR)
        raise typer.Exit(out.finish())

    try:
        selected = validate_selection(ingredients, data.ingredients_by_name)
    except SelectionError as e:
        out.error(str(e), exit_code=ExitCode.SELECTION_ERROR)
        raise typer.Exit(out.finish())

    catalog = data.catalog(selected_discipline)
    if not catalog:
        out.error(
            f"No recipes loaded for {selected_discipline.value}.",
            exit_code=ExitCode.NO_RESULT,
        )
        raise typer.Exit(out.finish())

    result = resolve(selected, selected_discipline, catalog, mode=mode_name, rng=rng)
    tie = is_tie(result.totals)

    out.set_data("discipline", selected_discipline.value)
    out.set_data("ingredients", [i.name for i in selected])
    out.set_data("tie", tie)
    out.set_data("result", result.model_dump(mode="json"))

    out.blank()
    out.totals_table(result.totals)

    dominant = result.dominant_attribute.display_name
    if tie:
        out.text(
            f"Dominant: [bold]{dominant}[/bold] "
            f"[dim](tie broken by {selected_discipline.value} priority)[/dim]"
        )
    else:
        out.text(f"Dominant: [bold]{dominant}[/bold]")
    out.text(f"Roll: {result.roll + 1} / 15 ({result.mode.value})")

    recipe = result.recipe
    if recipe is None:
        out.error("No recipe could be selected.", exit_code=ExitCode.NO_RESULT)
        raise typer.Exit(out.finish())

    if result.used_fallback:
        out.warning(
            f"{dominant} pool is incomplete; recipe chosen by fallback",
            suggestion=f"Add recipes up to 15 per quality in the {selected_discipline.value} catalog",
        )

    label = recipe.name or f"Recipe #{recipe.recipe_no}"
    if not recipe.discovered:
        label += " [magenta](new discovery)[/magenta]"
    out.recipe_card(recipe, headline=f"Crafted {label}")

    raise typer.Exit(out.finish())
