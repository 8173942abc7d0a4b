"""Command-line interface for cink."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from cink.errors import ConfigError
from cink.tokens import ParseMode, TokenType

if TYPE_CHECKING:
    from cink.render import Highlighter

CONFIG_FILENAME = "cink.toml"

# Bytes that are not UTF-8 round-trip through lone surrogates
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

_MODES = {"auto": ParseMode.AUTO, "config": ParseMode.CONFIG, "show": ParseMode.SHOW}


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    inputs: list[Path]
    output_file: Path | None
    theme: str
    mode: ParseMode
    force: bool
    colors: dict[TokenType, str] = field(default_factory=dict)
    stream: bool = False
    list_themes: bool = False
    demo: str | None = None
    debug: bool = False
    verbose: bool = False


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="cink",
        description="Colourize Cisco IOS configuration and show command output",
    )
    p.add_argument(
        "inputs",
        nargs="*",
        metavar="FILE",
        help="Input files (default: stdin; '-' also reads stdin)",
    )
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument("-t", "--theme", help="Colour theme (default: tokyonight)")
    p.add_argument(
        "-m",
        "--mode",
        choices=sorted(_MODES),
        help="Classification rules: auto-detect, configuration, or show output",
    )
    p.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Highlight even if the input does not look like IOS content",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_FILENAME})",
    )
    p.add_argument(
        "--stream",
        action="store_true",
        help="Process stdin line by line, flushing after each line",
    )
    p.add_argument("--list-themes", action="store_true", help="List available themes")
    p.add_argument(
        "--demo",
        choices=["config", "show", "themes"],
        help="Print built-in samples instead of reading input",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_FILENAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML: {exc}", path) from None


def parse_colors(table: Any, path: Path | None) -> dict[TokenType, str]:
    """Validate a ``[colors]`` table of category name -> escape string."""
    if not isinstance(table, dict):
        raise ConfigError("'colors' must be a table", path, "colors")

    colors: dict[TokenType, str] = {}
    for name, value in table.items():
        key = f"colors.{name}"
        try:
            tt = TokenType.from_label(str(name))
        except KeyError:
            raise ConfigError(f"unknown token category '{name}'", path, key) from None
        if not isinstance(value, str):
            raise ConfigError("colour must be a string", path, key)
        colors[tt] = value
    return colors


def resolve_options(args: argparse.Namespace, base_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    from cink.theme import DEFAULT_THEME, is_theme_name

    if base_dir is None:
        base_dir = Path.cwd()
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir)
    shown_path = config_path if config_path is not None else base_dir / CONFIG_FILENAME

    # Theme: config < CLI
    theme = DEFAULT_THEME
    cfg_theme = config.get("theme")
    if cfg_theme is not None:
        if not isinstance(cfg_theme, str) or not is_theme_name(cfg_theme):
            raise ConfigError(f"unknown theme '{cfg_theme}'", shown_path, "theme")
        theme = cfg_theme
    if args.theme is not None:
        if not is_theme_name(args.theme):
            raise ConfigError(f"unknown theme '{args.theme}'", key="--theme")
        theme = args.theme

    # Mode: config < CLI
    mode = ParseMode.AUTO
    cfg_mode = config.get("mode")
    if cfg_mode is not None:
        if not isinstance(cfg_mode, str) or cfg_mode.lower() not in _MODES:
            raise ConfigError(f"unknown mode '{cfg_mode}'", shown_path, "mode")
        mode = _MODES[cfg_mode.lower()]
    if args.mode is not None:
        mode = _MODES[args.mode]

    # Force: either source can switch the gate off
    cfg_force = config.get("force", False)
    if not isinstance(cfg_force, bool):
        raise ConfigError("'force' must be a boolean", shown_path, "force")
    force = cfg_force or args.force

    colors: dict[TokenType, str] = {}
    if "colors" in config:
        colors = parse_colors(config["colors"], shown_path)

    inputs = [Path(name) for name in args.inputs if name != "-"]
    output_file = Path(args.output) if args.output else None

    return CliOptions(
        inputs=inputs,
        output_file=output_file,
        theme=theme,
        mode=mode,
        force=force,
        colors=colors,
        stream=args.stream,
        list_themes=args.list_themes,
        demo=args.demo,
        debug=args.debug,
        verbose=args.verbose,
    )


def build_highlighter(options: CliOptions) -> Highlighter:
    """Create a Highlighter with the selected theme and colour overrides."""
    from cink.render import Highlighter
    from cink.theme import theme_by_name

    theme = theme_by_name(options.theme)
    for tt, color in options.colors.items():
        theme.set_color(tt, color)
    return Highlighter(theme)


def highlight_text(hl: Highlighter, text: str, options: CliOptions) -> str:
    if options.force:
        return hl.highlight_forced(text, options.mode)
    return hl.highlight(text, options.mode)


def decode(data: bytes) -> str:
    return data.decode(ENCODING, ENCODING_ERRORS)


def write_output(out: TextIO, text: str) -> None:
    """Write *text* to the byte buffer under *out*, restoring undecodable bytes.

    Going through the buffer also skips newline translation, so ``\\r`` and
    ``\\r\\n`` reach the output exactly as they were read.
    """
    out.flush()
    out.buffer.write(text.encode(ENCODING, ENCODING_ERRORS))
    out.buffer.flush()


def read_input(options: CliOptions) -> str:
    """Concatenate the input files, or read stdin when none are given.

    Input is read as bytes: line endings are kept verbatim and bytes that
    are not valid UTF-8 pass through unchanged.
    """
    if not options.inputs:
        return decode(sys.stdin.buffer.read())
    return "".join(decode(path.read_bytes()) for path in options.inputs)


def stream_lines(
    source: Iterable[bytes], out: TextIO, hl: Highlighter, options: CliOptions
) -> None:
    """Highlight ``source`` one line at a time, flushing after each line.

    Stops quietly on Ctrl-C.
    """
    try:
        for line in source:
            write_output(out, highlight_text(hl, decode(line), options))
    except KeyboardInterrupt:
        pass


def run_demo(options: CliOptions, out: TextIO) -> None:
    """Write the built-in samples, highlighted, to *out*."""
    from cink import samples
    from cink.render import Highlighter
    from cink.theme import THEME_NAMES, theme_by_name

    if options.demo == "themes":
        for name in THEME_NAMES:
            hl = Highlighter(theme_by_name(name))
            out.write(f"\n=== Theme: {name} ===\n")
            out.write(hl.highlight_forced(samples.THEME_PREVIEW))
        return

    hl = build_highlighter(options)
    if options.demo == "show":
        for title, text in samples.SHOW_OUTPUTS:
            out.write(f"\n--- {title} ---\n")
            out.write(hl.highlight_show_output(text))
        return

    out.write(f"\n=== Cisco IOS configuration (theme: {options.theme}) ===\n\n")
    out.write(hl.highlight_forced(samples.CONFIG, options.mode))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if options.list_themes:
        from cink.theme import THEME_NAMES

        for name in THEME_NAMES:
            print(name)
        return 0

    if options.demo is not None:
        run_demo(options, sys.stdout)
        return 0

    hl = build_highlighter(options)

    if options.stream:
        if options.output_file:
            with open(options.output_file, "w", encoding=ENCODING) as out:
                stream_lines(sys.stdin.buffer, out, hl, options)
        else:
            stream_lines(sys.stdin.buffer, sys.stdout, hl, options)
        return 0

    try:
        source = read_input(options)
    except OSError as exc:
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 1

    if options.debug:
        from cink.ansi import strip_ansi
        from cink.debug import dump_tokens
        from cink.lexer import tokenize

        dump_tokens(tokenize(strip_ansi(source), options.mode), file=sys.stderr)

    result = highlight_text(hl, source, options)

    if options.output_file:
        options.output_file.write_bytes(result.encode(ENCODING, ENCODING_ERRORS))
    else:
        write_output(sys.stdout, result)

    return 0
