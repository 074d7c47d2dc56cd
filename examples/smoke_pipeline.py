from __future__ import annotations

import asyncio
import logging

from conduit_state.config import YamlConfigLoader
from conduit_state.config.models import ConfigLoadRequest
from conduit_state.core.models import Action, ActionType
from conduit_state.logging import init_logging
from conduit_state.pipeline import create_runtime


async def _fetch_user() -> dict:
    await asyncio.sleep(0.05)
    return {"user": {"email": "jake@jake.jake", "username": "jake", "token": "jwt-token-123"}}


async def main() -> None:
    config = await YamlConfigLoader().load(ConfigLoadRequest(yaml_path="examples/config.yaml"))
    init_logging(config.logging)

    logger = logging.getLogger("smoke")
    runtime = create_runtime(config)
    await runtime.store.dispatch(Action(type=ActionType.LOGIN, payload=_fetch_user()))

    logger.info("Logged in token=%s", runtime.storage.get(config.persistence.token_key))
    logger.info("Auth in_progress=%s errors=%s", runtime.store.state.auth.in_progress, runtime.store.state.auth.errors)


if __name__ == "__main__":
    asyncio.run(main())
