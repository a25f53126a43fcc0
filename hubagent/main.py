#!/usr/bin/env python3
"""
Hub Agent - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Initializes modules
3. Runs the command watcher until SIGINT/SIGTERM

All business logic is in the modules, following black box principles.
"""

import asyncio
import logging
import logging.config as log_config
import signal
import sys

from hubagent.config.provider import ConfigProvider, EnvConfigProvider
from hubagent.logging_config import get_logging_config
from hubagent.modules.commands import CommandRouter, Watcher
from hubagent.modules.kube import KubernetesACPStore, KubernetesIngressStore, load_kube_config
from hubagent.modules.platform import PlatformClient

logger = logging.getLogger("hubagent.main")

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


async def run(config_provider: ConfigProvider) -> None:
    """Build the modules and run the watcher until a stop signal."""
    platform_config = config_provider.get_platform_config()
    watcher_config = config_provider.get_watcher_config()

    load_kube_config(config_provider.get_kube_config().kubeconfig)

    router = CommandRouter.from_stores(KubernetesIngressStore(), KubernetesACPStore())
    platform = PlatformClient(
        platform_config.url,
        platform_config.token,
        timeout=platform_config.timeout,
        verify=platform_config.verify,
    )
    watcher = Watcher(platform, router, interval=watcher_config.poll_interval)

    loop = asyncio.get_running_loop()
    for sig in STOP_SIGNALS:
        loop.add_signal_handler(sig, watcher.stop)

    try:
        await watcher.run()
    finally:
        for sig in STOP_SIGNALS:
            loop.remove_signal_handler(sig)
        await platform.close()


def main() -> None:
    """Main entry point."""
    config_provider = EnvConfigProvider()

    try:
        log_config.dictConfig(get_logging_config(config_provider.get_log_level()))
        asyncio.run(run(config_provider))
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Agent stopped")


if __name__ == "__main__":
    main()
