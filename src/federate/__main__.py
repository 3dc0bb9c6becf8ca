"""Resolve one LinkedIn identity from an OAuth1 token pair and print it as JSON."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from loguru import logger

from federate import __version__
from federate.config import Config, cfg, load_config_with_env
from federate.core.errors import AuthenticationError, ConfigurationError
from federate.http import HTTPXLayer
from federate.identity import LinkedInIdentity, OAuth1Info, passthrough
from federate.providers import LinkedInProvider, OAuth1Signer

# Third-party libraries to intercept and route through loguru
_INTERCEPTED_LIBRARIES = ["httpx", "httpcore"]


def _intercept_logging(level: str) -> None:
    """Route third-party library logs to loguru."""

    class InterceptHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            try:
                log_level = logger.level(record.levelname).name
            except ValueError:
                log_level = str(record.levelno)
            msg = record.getMessage().replace("{", "{{").replace("}", "}}")
            logger.patch(
                lambda r: r.update(
                    name=record.name,
                    function=record.funcName,
                    line=record.lineno,
                ),
            ).opt(exception=record.exc_info).log(log_level, msg)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for lib in _INTERCEPTED_LIBRARIES:
        lib_logger = logging.getLogger(lib)
        lib_logger.handlers = [InterceptHandler()]
        lib_logger.propagate = False
        # httpx logs full request URLs at INFO; keep them out unless debugging
        lib_logger.setLevel(level if level == "DEBUG" else "WARNING")


def _safe_message_filter(record: Any) -> bool:
    """Escape braces/angles in log messages to prevent format/tag errors."""
    if isinstance(record.get("message"), str):
        msg = record["message"]
        msg = msg.replace("{", "{{").replace("}", "}}").replace("<", "\\<")
        record["message"] = msg
    return True


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru. verbose=True or LOG_LEVEL=DEBUG enables DEBUG; otherwise INFO."""
    level = "INFO"
    if verbose:
        level = "DEBUG"
    else:
        env_level = (os.environ.get("LOG_LEVEL") or "").upper()
        if env_level in ("DEBUG", "INFO", "WARNING", "ERROR"):
            level = env_level

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=("<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | {message}"),
        filter=_safe_message_filter,
    )
    _intercept_logging(level)


def reload_config(config_path: Path) -> Config:
    """Load config from path and update global cfg."""
    data = load_config_with_env(config_path)
    cfg.reload(data)
    return cfg


def build_provider(config: Config) -> LinkedInProvider[LinkedInIdentity]:
    settings = config.linkedin.require_consumer()
    return LinkedInProvider(
        settings,
        HTTPXLayer(timeout=config.http_timeout_seconds),
        passthrough,
        signer=OAuth1Signer(),
    )


async def run(config: Config, auth_info: OAuth1Info) -> LinkedInIdentity:
    provider = build_provider(config)
    return await provider.resolve(auth_info)


def main(argv: list[str] | None = None) -> int:
    """Main entrypoint. Returns the process exit code."""
    parser = argparse.ArgumentParser(description="Resolve a LinkedIn identity from an OAuth1 token pair")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument("--token", required=True, help="OAuth1 access token")
    parser.add_argument("--secret", required=True, help="OAuth1 access token secret")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        config = reload_config(args.config)
        identity = asyncio.run(run(config, OAuth1Info(args.token, args.secret)))
    except ConfigurationError as exc:
        logger.error("Configuration error: {}", exc)
        return 2
    except AuthenticationError as exc:
        logger.error("{}", exc)
        return 1

    print(json.dumps(identity.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
