"""Typer-based command line interface for rendering name combinations.

A record is given either as a YAML/JSON file (``--names``) or through the
individual part options; options override the parts read from the file.

Exit codes
----------
0 success
2 usage error (unknown combination or grammatical case)
3 I/O error (missing file, unsupported extension, malformed document)
4 configuration error
5 rendering error (missing name element, not expressionable, unsupported locale)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .grammar.case import GrammaticalCase
from .grammar.locale import language_of
from .io import load_names
from .names.combo import EXAMPLE_LOCALE, EXAMPLE_NAMES, NameCombo
from .names.moniker import moniker as select_moniker
from .names.record import Names
from .names.resolver import designate
from .utils.errors import (
    IOFormatError,
    MissingNameElementError,
    NameComboError,
    NotExpressionableError,
    ParseError,
    UnsupportedLocaleError,
)
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="namecombo",
    help="Render personal names as combinations. Use 'namecombo render COMBO' to render one.",
)

NamesFileOpt = Annotated[
    Optional[Path], typer.Option("--names", "-n", help="YAML or JSON file holding the name record")
]
ForenameOpt = Annotated[
    Optional[list[str]],
    typer.Option("--forename", "-f", help="Forename; repeat in order, the first is the firstname"),
]
PredicateOpt = Annotated[Optional[str], typer.Option(help="Nobility particle, e.g. 'von'")]
SurnameOpt = Annotated[Optional[str], typer.Option(help="Surname without predicate")]
BirthnameOpt = Annotated[Optional[str], typer.Option(help="Maiden or prior surname")]
TitleOpt = Annotated[Optional[str], typer.Option(help="Academic or formal title")]
RankOpt = Annotated[Optional[str], typer.Option(help="Professional or military rank")]
NicknameOpt = Annotated[Optional[str], typer.Option(help="Nickname")]
HonornameOpt = Annotated[Optional[str], typer.Option(help="Honorific epithet")]
SupernameOpt = Annotated[Optional[str], typer.Option(help="Inserted secondary name")]
GenderOpt = Annotated[
    Optional[str], typer.Option(help="undefined, male, female, neutral or other")
]
CaseOpt = Annotated[
    Optional[str],
    typer.Option("--case", "-c", help="nominative, genetive (or s), dative, accusative"),
]
LocaleOpt = Annotated[Optional[str], typer.Option("--locale", "-l", help="Language tag, e.g. de-DE")]
ConfigOpt = Annotated[
    Optional[Path], typer.Option("--config", help="YAML config to override defaults")
]
VerboseOpt = Annotated[
    bool, typer.Option("--verbose", "-v", help="Emit debug messages to stderr")
]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _setup(config_path: Path | None, verbose: bool) -> ConfigModel:
    """Load configuration and configure logging."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    logger.debug("Loaded config (locale=%s, case=%s)", cfg.locale, cfg.case)
    return cfg


def _resolve_case(text: str | None, cfg: ConfigModel) -> GrammaticalCase:
    if text is None:
        return cfg.case
    try:
        return GrammaticalCase.parse(text)
    except ParseError as exc:
        _safe_exit(2, str(exc))
    raise AssertionError("unreachable")  # pragma: no cover


def _build_names(names_file: Path | None, **parts: Any) -> Names:
    """Return the record read from ``names_file`` with ``parts`` applied on top."""

    data: dict[str, Any] = {}
    if names_file is not None:
        try:
            data = load_names(names_file).model_dump()
        except (FileNotFoundError, IOFormatError, OSError, ValidationError) as exc:
            _safe_exit(3, str(exc).splitlines()[0])
    for key, value in parts.items():
        if value is not None and value != []:
            data[key] = value
    try:
        return Names.model_validate(data)
    except ValidationError as exc:
        _safe_exit(2, str(exc).splitlines()[0])
    raise AssertionError("unreachable")  # pragma: no cover


def _render(func: Any, *args: Any) -> str:
    try:
        return str(func(*args))
    except NameComboError as exc:
        _safe_exit(5, str(exc))
    raise AssertionError("unreachable")  # pragma: no cover


@app.callback()
def main() -> None:
    """Entry point for the namecombo command group."""
    pass


@app.command()
def render(  # noqa: PLR0913
    combo: Annotated[str, typer.Argument(help="Combination symbol, e.g. TitleName")],
    names_file: NamesFileOpt = None,
    forename: ForenameOpt = None,
    predicate: PredicateOpt = None,
    surname: SurnameOpt = None,
    birthname: BirthnameOpt = None,
    title: TitleOpt = None,
    rank: RankOpt = None,
    nickname: NicknameOpt = None,
    honorname: HonornameOpt = None,
    supername: SupernameOpt = None,
    gender: GenderOpt = None,
    case: CaseOpt = None,
    locale: LocaleOpt = None,
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Render the record as ``COMBO``."""

    cfg = _setup(config_path, verbose)
    try:
        name_combo = NameCombo.parse(combo)
    except ParseError as exc:
        _safe_exit(2, str(exc))
    grammatical_case = _resolve_case(case, cfg)
    names = _build_names(
        names_file,
        forenames=forename,
        predicate=predicate,
        surname=surname,
        birthname=birthname,
        title=title,
        rank=rank,
        nickname=nickname,
        honorname=honorname,
        supername=supername,
        gender=gender,
    )
    typer.echo(_render(designate, names, name_combo, grammatical_case, locale or cfg.locale))


@app.command()
def moniker(  # noqa: PLR0913
    names_file: NamesFileOpt = None,
    forename: ForenameOpt = None,
    predicate: PredicateOpt = None,
    surname: SurnameOpt = None,
    birthname: BirthnameOpt = None,
    title: TitleOpt = None,
    rank: RankOpt = None,
    nickname: NicknameOpt = None,
    honorname: HonornameOpt = None,
    supername: SupernameOpt = None,
    gender: GenderOpt = None,
    case: CaseOpt = None,
    locale: LocaleOpt = None,
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print the best available casual identification of the record."""

    cfg = _setup(config_path, verbose)
    grammatical_case = _resolve_case(case, cfg)
    names = _build_names(
        names_file,
        forenames=forename,
        predicate=predicate,
        surname=surname,
        birthname=birthname,
        title=title,
        rank=rank,
        nickname=nickname,
        honorname=honorname,
        supername=supername,
        gender=gender,
    )
    typer.echo(_render(select_moniker, names, grammatical_case, locale or cfg.locale))


@app.command("all")
def render_all(  # noqa: PLR0913
    names_file: NamesFileOpt = None,
    forename: ForenameOpt = None,
    predicate: PredicateOpt = None,
    surname: SurnameOpt = None,
    birthname: BirthnameOpt = None,
    title: TitleOpt = None,
    rank: RankOpt = None,
    nickname: NicknameOpt = None,
    honorname: HonornameOpt = None,
    supername: SupernameOpt = None,
    gender: GenderOpt = None,
    case: CaseOpt = None,
    locale: LocaleOpt = None,
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print every combination that applies to the record, one per line."""

    cfg = _setup(config_path, verbose)
    grammatical_case = _resolve_case(case, cfg)
    names = _build_names(
        names_file,
        forenames=forename,
        predicate=predicate,
        surname=surname,
        birthname=birthname,
        title=title,
        rank=rank,
        nickname=nickname,
        honorname=honorname,
        supername=supername,
        gender=gender,
    )
    lang = locale or cfg.locale
    try:
        language_of(lang)
    except UnsupportedLocaleError as exc:
        _safe_exit(5, str(exc))
    rendered = 0
    for name_combo in NameCombo.ALL:
        try:
            text = designate(names, name_combo, grammatical_case, lang)
        except (MissingNameElementError, NotExpressionableError) as exc:
            logger.debug("Skipping %s: %s", name_combo, exc)
            continue
        rendered += 1
        typer.echo(f"{name_combo}: {text}")
    if rendered == 0:
        _safe_exit(5, "no combination applies to the record")


@app.command()
def combos() -> None:
    """List the combination vocabulary with an example for each symbol."""

    typer.echo(f"# {EXAMPLE_NAMES.designate(NameCombo.FULLNAME, None, EXAMPLE_LOCALE)}")
    for name_combo in NameCombo.ALL:
        typer.echo(f"{name_combo.value:<18} {name_combo.example}")
