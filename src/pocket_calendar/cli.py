from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional, Sequence, Tuple

import orjson

from .bootstrap import configure_logging
from .config import AppSettings, get_settings
from .core import build_view, new_session
from .core import session as transitions
from .domain import ViewMode, parse_day


def _day_arg(value: str) -> date:
    try:
        return parse_day(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def _event_arg(value: str) -> Tuple[str, str]:
    day, sep, title = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD=TITLE, got {value!r}")
    return day.strip(), title


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pocket Calendar command line interface.")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("gui", help="Launch the desktop calendar (default).")

    grid_parser = subparsers.add_parser("grid", help="Print the calendar grid for a date as JSON.")
    grid_parser.add_argument("--date", type=_day_arg, default=None, help="Anchor date, defaults to today.")
    grid_parser.add_argument("--view", choices=[mode.value for mode in ViewMode], default=None)
    grid_parser.add_argument(
        "--event",
        dest="events",
        action="append",
        type=_event_arg,
        default=[],
        metavar="YYYY-MM-DD=TITLE",
        help="Place an event on the grid; may be repeated.",
    )

    return parser


def render_grid(
    *,
    anchor: Optional[date] = None,
    view: Optional[str] = None,
    events: Sequence[Tuple[str, str]] = (),
    settings: Optional[AppSettings] = None,
    today: Optional[date] = None,
) -> bytes:
    """Build a session from the arguments and dump its rendered grid as JSON.

    Events go through the editor, so drafts it would reject raise
    ``ValueError`` with the editor's message.
    """

    settings = settings or get_settings()
    session = new_session(
        today=anchor or today,
        view_mode=ViewMode(view) if view else settings.ui.default_view,
        first_weekday=settings.ui.first_weekday,
    )
    for day, title in events:
        session = transitions.open_create(session, day)
        session = transitions.save(transitions.set_draft_title(session, title))
        if session.notice:
            raise ValueError(f"{day}={title!r}: {session.notice}")

    view_model = build_view(session, today=today, header_format=settings.ui.header_format)
    return orjson.dumps(view_model.to_record(), option=orjson.OPT_INDENT_2)


def main(argv: Optional[List[str]] = None) -> None:
    configure_logging()
    logging.getLogger(__name__).info("Pocket Calendar CLI starting")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in (None, "gui"):
        from .ui.app import run_gui

        run_gui()
    elif args.command == "grid":
        try:
            payload = render_grid(anchor=args.date, view=args.view, events=args.events)
        except ValueError as exc:
            parser.error(str(exc))
        sys.stdout.write(payload.decode("utf-8") + "\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
