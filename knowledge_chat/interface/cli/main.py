"""Operator CLI for the chat core.

Subcommands:
    weights --count N                  print attribution weights for N ranked chunks
    quota --user-id ID                 print the message quota of an internal user
    verify --chatbot-id ID --subject S print the dashboard access outcome for a subject
"""

import argparse

from knowledge_chat.config.compose import build_container
from knowledge_chat.config.logging_setup import setup_logging
from knowledge_chat.domain.errors import ValidationError
from knowledge_chat.domain.models import WeightedChunk
from knowledge_chat.infrastructure.identity.header_identity import StaticIdentityProvider


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="knowledge-chat")
    sub = parser.add_subparsers(dest="command", required=True)

    weights = sub.add_parser("weights", help="Position weights for N ranked chunks")
    weights.add_argument("--count", type=int, required=True)

    quota = sub.add_parser("quota", help="Message quota for an internal user id")
    quota.add_argument("--user-id", default=None)

    verify = sub.add_parser("verify", help="Chatbot ownership check for a subject")
    verify.add_argument("--chatbot-id", required=True)
    verify.add_argument("--subject", default=None, help="Identity provider subject")

    return parser


def run_weights(count: int) -> None:
    if count < 0:
        raise ValidationError("--count must be >= 0")
    container = build_container()
    chunks = [WeightedChunk(chunk_id=f"chunk-{i + 1}") for i in range(count)]
    for a in container.get_attribution_use_case().execute(chunks):
        print(f"[{a.rank}] {a.chunk_id} weight={a.weight:.4f}")


def run_quota(user_id: str | None) -> None:
    container = build_container()
    status = container.get_rate_limit_use_case().execute(user_id)
    print(
        f"allowed={status.allowed} remaining={status.remaining} "
        f"limit={status.limit} source={status.source.value}"
    )


def run_verify(chatbot_id: str, subject: str | None) -> int:
    container = build_container()
    result = container.get_ownership_use_case().execute(
        chatbot_id, StaticIdentityProvider(subject)
    )
    if result.ok and result.value is not None:
        bot = result.value.chatbot
        print(f"OK user={result.value.user_id} chatbot={bot.id} ({bot.title})")
        return 0

    err = result.error
    print(f"[DENIED] {err.kind.value}: {err.message}")
    return 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("WARNING")

    if args.command == "weights":
        run_weights(args.count)
        return 0
    if args.command == "quota":
        run_quota(args.user_id)
        return 0
    return run_verify(args.chatbot_id, args.subject)


if __name__ == "__main__":
    raise SystemExit(main())
