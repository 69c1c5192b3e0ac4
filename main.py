"""CLI entry point for the boolean builder."""

import argparse
import json
import logging
import sys

from boolean_builder.assist import available_providers
from boolean_builder.assist.remote import RemoteAssistError
from boolean_builder.core.config import Settings
from boolean_builder.core.schemas import Platform, ResultBundle, SearchRequest
from boolean_builder.engine.peoplegpt import build_peoplegpt_link, build_peoplegpt_prompt
from boolean_builder.generator import generate


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Boolean builder - turn recruiting inputs into a boolean search string",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- generate subcommand ---
    generate_parser = subparsers.add_parser("generate", help="Build one boolean string")
    generate_parser.add_argument("--role", required=True, help="Role or job title (required)")
    generate_parser.add_argument("--skills", default="", help="Comma-separated required skills")
    generate_parser.add_argument("--exclude", default="", help="Comma-separated terms to exclude")
    generate_parser.add_argument("--location", default="", help="Location, or a ready OR-block")
    generate_parser.add_argument(
        "--platform",
        default=None,
        help="Target platform: LinkedIn, GitHub, Google X-Ray, Generic "
        "(default: generator.default_platform from config)",
    )
    generate_parser.add_argument(
        "--assist",
        action="store_true",
        help="Use the remote LLM assist path instead of the local engine",
    )
    generate_parser.add_argument(
        "--provider",
        choices=available_providers(),
        help="LLM provider for --assist (default: assist.provider from config)",
    )
    generate_parser.add_argument("--model", help="Override the provider's default model")
    generate_parser.add_argument(
        "--peoplegpt",
        action="store_true",
        help="Also print a PeopleGPT prompt and its deep link",
    )
    generate_parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML file (optional)",
    )
    _add_common(generate_parser)

    # --- batch subcommand ---
    batch_parser = subparsers.add_parser(
        "batch",
        help="Build boolean strings for every request listed in a settings file",
    )
    batch_parser.add_argument(
        "--config",
        default="config/settings.yaml",
        help="Path to settings YAML file (default: config/settings.yaml)",
    )
    _add_common(batch_parser)

    # --- platforms subcommand ---
    subparsers.add_parser("platforms", help="List supported platform modes")

    return parser.parse_args(argv)


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def render(bundle: ResultBundle, output_format: str) -> str:
    if output_format == "json":
        return bundle.to_json()
    return f"{bundle.boolean}\n\n{bundle.explanation}"


def load_settings(path: str | None) -> Settings:
    return Settings.from_yaml(path) if path else Settings()


def cmd_generate(args: argparse.Namespace) -> None:
    """Handle generate subcommand."""
    settings = load_settings(args.config)

    generator = settings.generator
    if args.assist:
        generator = generator.model_copy(update={"mode": "assist"})

    assist = settings.assist
    overrides = {k: v for k, v in (("provider", args.provider), ("model", args.model)) if v}
    if overrides:
        assist = assist.model_copy(update=overrides)

    request = SearchRequest(
        role=args.role,
        skills=args.skills,
        exclude=args.exclude,
        location=args.location,
        platform=args.platform or generator.default_platform,
    )
    bundle = generate(request, generator, assist)
    if not args.peoplegpt:
        print(render(bundle, args.format))
        return

    prompt = build_peoplegpt_prompt(request)
    link = build_peoplegpt_link(prompt)
    if args.format == "json":
        payload = bundle.model_dump(by_alias=True)
        payload["peoplegpt"] = {"prompt": prompt, "link": link}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    print(f"{render(bundle, 'text')}\n\nPeopleGPT prompt: {prompt}\nPeopleGPT link: {link}")


def cmd_batch(args: argparse.Namespace) -> None:
    """Handle batch subcommand."""
    settings = Settings.from_yaml(args.config)
    if not settings.requests:
        msg = f"No requests configured in {args.config}"
        raise ValueError(msg)

    bundles: list[ResultBundle] = []
    for request in settings.requests:
        if "platform" not in request.model_fields_set:
            request = request.model_copy(
                update={"platform": settings.generator.default_platform}
            )
        bundles.append(generate(request, settings.generator, settings.assist))

    if args.format == "json":
        payload = [b.model_dump(by_alias=True) for b in bundles]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    print("\n\n---\n\n".join(render(b, "text") for b in bundles))


def cmd_platforms() -> None:
    """Handle platforms subcommand."""
    for platform in Platform:
        print(platform.value)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    if args.command == "platforms":
        cmd_platforms()
        return

    setup_logging(args.verbose)
    handler = cmd_batch if args.command == "batch" else cmd_generate
    try:
        handler(args)
    except RemoteAssistError as e:
        print(f"Error: {e}: {e.payload}", file=sys.stderr)
        sys.exit(1)
    except (FileNotFoundError, ImportError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
