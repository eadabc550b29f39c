import asyncio
import sys
from argparse import ArgumentParser, RawTextHelpFormatter

from amounts.shared.config import get_settings
from amounts.shared.di import cleanup_resources, get_container
from amounts.shared.logging import configure_logging, get_logger

settings = get_settings()

configure_logging(
    log_level=settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS
)

logger = get_logger(__name__)


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Currency Amounts App Entrypoint",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    api_parser = subparsers.add_parser("api", help="Run the FastAPI web server.")
    api_parser.set_defaults(func=run_api)

    seed_parser = subparsers.add_parser(
        "seed-currencies",
        aliases=["seed"],
        help="Upsert the built-in currency catalogue and invalidate cached decimals."
    )
    seed_parser.set_defaults(func=run_seed)

    invalidate_parser = subparsers.add_parser(
        "invalidate-cache",
        help="Drop cached currency metadata after an administrative change."
    )
    invalidate_parser.set_defaults(func=run_invalidate)

    return parser


def run_api(args) -> None:
    import uvicorn
    from amounts.adapters.inbound.api.app import app

    logger.info(
        "api_starting",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL
    )

    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
    )


async def run_seed_async(args) -> None:
    container = get_container(app_type="cli")

    try:
        handler = container.seed_currencies_command_handler()
        count = await handler.handle()
        logger.info("seed_completed", currency_count=count)
    finally:
        await cleanup_resources(container)


def run_seed(args) -> None:
    asyncio.run(run_seed_async(args))


async def run_invalidate_async(args) -> None:
    container = get_container(app_type="cli")

    try:
        store = container.metadata_store()
        await store.invalidate_cache()
    finally:
        await cleanup_resources(container)


def run_invalidate(args) -> None:
    asyncio.run(run_invalidate_async(args))


def main() -> None:
    parser = setup_arg_parser()
    args = parser.parse_args()

    logger.info("command_starting", command=args.command)

    try:
        args.func(args)
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            exc_info=True
        )
        sys.exit(1)

    logger.info("command_completed", command=args.command)
    sys.exit(0)


if __name__ == "__main__":
    main()
