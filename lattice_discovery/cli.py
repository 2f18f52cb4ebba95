"""CLI entrypoint for frontier searches and their renderings.

This module owns argument parsing, config-file layering and mode dispatch.
The search itself lives in ``lattice_discovery.search``; renderers live in
``lattice_discovery.viz`` and are imported only by the ``render`` command.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from lattice_discovery.config.constants import (
    DEFAULT_FIXED_BATCH_SIZE,
    DEFAULT_FPS,
    DEFAULT_INITIAL_MAX,
    DEFAULT_PACING,
    DEFAULT_TARGET,
    PACING_NAMES,
)
from lattice_discovery.config.types import ExplorerConfig, RenderConfig
from lattice_discovery.io.paths import animation_path, final_map_path
from lattice_discovery.search.driver import (
    RoundLimitExceededError,
    run_search_from_config,
)
from lattice_discovery.search.explorer import FrontierExplorer

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# Value coercion (CLI > file > default)
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """Pick the CLI value, else the config-file entry, else *default*."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """Resolve an integer setting such as ``target`` or ``fps``."""
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_int(cli_val: int | None, key: str, file_cfg: dict[str, object]) -> int | None:
    """Resolve an integer setting whose absence means unbounded (``max_rounds``)."""
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_int(raw, key)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """Resolve an on/off flag such as ``keep_bad``."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    """Resolve a named choice such as ``pacing`` or ``theme``."""
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _load_file_config(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        file_cfg = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(file_cfg, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return file_cfg


def _explorer_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> ExplorerConfig:
    return ExplorerConfig(
        target=_get_int(args.target, "target", file_cfg, DEFAULT_TARGET),
        initial_max=_get_int(args.initial_max, "initial_max", file_cfg, DEFAULT_INITIAL_MAX),
        pacing=_get_str(args.pacing, "pacing", file_cfg, DEFAULT_PACING),
        batch_size=_get_int(args.batch_size, "batch_size", file_cfg, DEFAULT_FIXED_BATCH_SIZE),
        max_rounds=_get_optional_int(args.max_rounds, "max_rounds", file_cfg),
    )


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _add_search_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    p.add_argument("--target", type=int, default=None)
    p.add_argument("--initial-max", type=int, default=None)
    p.add_argument("--pacing", type=str, choices=list(PACING_NAMES), default=None)
    p.add_argument(
        "--batch-size", type=int, default=None, help="Chunk size for --pacing fixed"
    )
    p.add_argument("--max-rounds", type=int, default=None)


def _build_search_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("search", help="Run a search and print a JSON summary")
    p.set_defaults(func=_handle_search)
    _add_search_arguments(p)


def _build_render_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("render", help="Run a search and render it")
    p.set_defaults(func=_handle_render)
    _add_search_arguments(p)
    p.add_argument("--output", type=Path, default=None)
    p.add_argument("--out-dir", type=Path, default=None)
    p.add_argument("--fps", type=int, default=None)
    p.add_argument("--keep-bad", action=argparse.BooleanOptionalAction, default=None)
    p.add_argument(
        "--final-only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Render a static map of the finished search instead of an animation",
    )
    p.add_argument("--theme", type=str, default=None, help="Theme preset (default, dark, paper)")
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Digit-sum lattice frontier search")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING"
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_search_parser(sub)
    _build_render_parser(sub)
    return parser


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _handle_search(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    config = _explorer_config(args, file_cfg)
    result = run_search_from_config(config)
    return {**result.summary(), "pacing": config.pacing}


def _handle_render(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    from lattice_discovery.viz.render import render_final_map, render_search_animation
    from lattice_discovery.viz.theme import get_theme

    config = _explorer_config(args, file_cfg)
    render_config = RenderConfig(
        fps=_get_int(args.fps, "fps", file_cfg, DEFAULT_FPS),
        keep_bad=_get_bool(args.keep_bad, "keep_bad", file_cfg, False),
    )
    theme = get_theme(_get_str(args.theme, "theme", file_cfg, "default"))
    final_only = _get_bool(args.final_only, "final_only", file_cfg, False)
    out_dir = Path(_get_str(args.out_dir, "out_dir", file_cfg, "figures"))

    if final_only:
        output = args.output or final_map_path(out_dir, config.target)
        result = run_search_from_config(config)
        render_final_map(
            result, output, config=render_config, base_dir=args.base_dir, theme=theme
        )
        return {**result.summary(), "output": str(output)}

    output = args.output or animation_path(out_dir, config.target)
    explorer = FrontierExplorer.from_config(config)
    frames = render_search_animation(
        explorer,
        output,
        config=render_config,
        base_dir=args.base_dir,
        theme=theme,
        max_rounds=config.max_rounds,
    )
    return {
        "target": config.target,
        "rounds": explorer.rounds,
        "frames": frames,
        "max": explorer.max_coord,
        "output": str(output),
    }


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json`` for reproducible runs. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    file_cfg = _load_file_config(parser, args.config)
    try:
        summary = args.func(args, file_cfg)
    except (TypeError, ValueError, RoundLimitExceededError) as exc:
        parser.error(str(exc))
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
