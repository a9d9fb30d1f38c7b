"""Interactive terminal form for the registration validator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from regform.config.loader import load_config
from regform.config.logging import configure_logging
from regform.config.models import FormConfig
from regform.domain.events import FocusGained, FocusLost, SubmitRequested, ValueChanged
from regform.domain.fields import FieldName
from regform.infrastructure.session_store import InMemorySessionStore
from regform.orchestration.projection import render_errors, render_value
from regform.orchestration.runtime import FormRuntime

HELP = """Commands:
  <field> <value>   set a field (focus, type, leave); fields: {fields}
  submit            validate everything and submit
  show              print the form
  quit              leave"""

_YES = {"yes", "y", "true"}
_NO = {"no", "n", "false"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Registration form interactive demo")
    p.add_argument("--config", "-c", default=None, help="Path to form YAML config")
    p.add_argument("--session", "-s", default="cli-session", help="Session ID")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    p.add_argument("--log-json", action="store_true", help="Log JSON lines to stderr")
    return p.parse_args(argv)


def resolve_field(token: str) -> FieldName | None:
    """Match a typed field name case-insensitively."""
    for f in FieldName:
        if f.value.lower() == token.lower():
            return f
    return None


def parse_value(field: FieldName, raw: str) -> Any:
    """Convert typed text into the field's value; empty input clears selections."""
    raw = raw.strip()
    if field == FieldName.DEVELOPER:
        if not raw:
            return None
        if raw.lower() in _YES:
            return True
        if raw.lower() in _NO:
            return False
        raise ValueError("answer yes or no")
    if field == FieldName.TITLE:
        return raw or None
    return raw


def render_form(runtime: FormRuntime, session_id: str) -> list[str]:
    config = runtime.config
    snapshot = runtime.get_snapshot(session_id)
    errors = render_errors(snapshot, config)
    lines = []
    for f in FieldName:
        line = f"{config.label_for(f)}: {render_value(f, snapshot.values)}"
        if f in errors:
            line += f"  [{errors[f]}]"
        lines.append(line)
    return lines


def run_interactive(
    runtime: FormRuntime,
    session_id: str,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    config = runtime.config
    runtime.start_session(session_id)
    write(config.name)
    write(HELP.format(fields=", ".join(f.value for f in FieldName)))
    while True:
        try:
            line = read("> ").strip()
        except EOFError:
            break
        if not line:
            continue
        command, _, rest = line.partition(" ")
        if command.lower() in ("quit", "exit", "q"):
            write("Goodbye.")
            break
        if command.lower() == "show":
            for out in render_form(runtime, session_id):
                write(out)
            continue
        if command.lower() == "submit":
            result = runtime.handle_event(session_id, SubmitRequested())
            if result.ok:
                write(config.success_message)
                write(result.data.model_dump_json(by_alias=True))
            else:
                errors = render_errors(runtime.get_snapshot(session_id), config)
                for f, msg in errors.items():
                    write(f"{config.label_for(f)}: {msg}")
            continue

        field = resolve_field(command)
        if field is None:
            write(f"Unknown field or command: {command}")
            continue
        try:
            value = parse_value(field, rest)
        except ValueError as e:
            write(f"Invalid value for {config.label_for(field)}: {e}")
            continue
        runtime.handle_event(session_id, FocusGained(field=field))
        try:
            runtime.handle_event(session_id, ValueChanged(field=field, value=value))
        except ValidationError:
            write(f"Invalid value for {config.label_for(field)}: {rest.strip()}")
        finally:
            runtime.handle_event(session_id, FocusLost(field=field))
        error = render_errors(runtime.get_snapshot(session_id), config).get(field)
        if error:
            write(f"{config.label_for(field)}: {error}")
    runtime.end_session(session_id)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(verbose=args.verbose, log_json=args.log_json)
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        config = FormConfig()

    runtime = FormRuntime(config, InMemorySessionStore())
    run_interactive(runtime, args.session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
