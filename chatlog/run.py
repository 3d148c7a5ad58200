from __future__ import annotations

import argparse
import dataclasses
import sys

from rich.console import Console
from rich.markup import escape

from chatlog.config import load_settings
from chatlog.errors import ApiError
from chatlog.llm import build_client
from chatlog.schema import Conversation
from chatlog.utils.run_log import append_exchange, init_run_log, make_run_id


def build_conversation(prompt: str, system: str | None = None) -> Conversation:
    convo = Conversation()
    if system:
        convo = convo.system(system)
    return convo.user(prompt)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="chatlog")
    parser.add_argument("prompt", type=str, help="user message to send")
    parser.add_argument("--system", type=str, default=None, help="optional system message sent first")
    parser.add_argument("--model", type=str, default=None, help="override CHATLOG_MODEL")
    parser.add_argument("--json", action="store_true", help="print the raw response JSON")
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="do not append the exchange to logs/run_*.jsonl",
    )
    args = parser.parse_args(argv)

    console = Console()
    settings = load_settings()
    if args.model:
        settings = dataclasses.replace(settings, model=args.model)
    client = build_client(settings)

    conversation = build_conversation(args.prompt, args.system)

    log_paths = None
    if not args.no_log:
        log_paths = init_run_log(settings.log_dir, make_run_id())

    run_info = {"backend": settings.backend, "model": settings.model}
    response = None
    try:
        response = client.complete_chat(conversation)
        choice = response.first_choice()
    except ApiError as exc:
        if log_paths is not None:
            append_exchange(log_paths, conversation, response=response, error=exc, extra=run_info)
        # Server and validation text may contain square brackets.
        console.print(f"[bold red]{exc.kind.value} error[/bold red]: {escape(exc.message)}")
        return 1
    finally:
        close = getattr(client, "close", None)
        if close is not None:
            close()

    if log_paths is not None:
        append_exchange(log_paths, conversation, response=response, extra=run_info)

    if args.json:
        sys.stdout.write(response.to_json() + "\n")
        return 0

    console.rule(escape(f"{choice.message.role.value} ({response.id})"))
    console.print(choice.message.content, markup=False)
    console.print(f"[bold]finish_reason[/bold]: {choice.finish_reason.value}")
    u = response.usage
    console.print(f"[bold]usage[/bold]: prompt={u.prompt_tokens} completion={u.completion_tokens} total={u.total_tokens}")
    if log_paths is not None:
        console.print(f"[bold]run_log[/bold]: {log_paths.jsonl_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
