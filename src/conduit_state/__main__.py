from __future__ import annotations

import argparse
import asyncio
import json
import logging

from conduit_state.config import ConfigLoader, YamlConfigLoader
from conduit_state.config.models import ConfigLoadRequest
from conduit_state.logging import init_logging
from conduit_state.persistence import restore_session
from conduit_state.pipeline import create_runtime
from conduit_state.replay import load_script, run_script, state_to_dict

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="conduit-state", description="Conduit client state pipeline")
    parser.add_argument(
        "--config",
        default="data/config/config.yaml",
        help="Path to config.yaml (default: data/config/config.yaml; defaults apply if missing)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Command: replay
    replay_parser = subparsers.add_parser("replay", help="Run a scripted session and print the final state")
    replay_parser.add_argument("script", help="Path to a YAML list of steps")
    replay_parser.add_argument(
        "--restore-session",
        action="store_true",
        help="Dispatch APP_LOAD with the persisted token before the script runs.",
    )

    return parser


async def _replay(args: argparse.Namespace) -> None:
    loader: ConfigLoader = YamlConfigLoader(require_file=False)
    config = await loader.load(ConfigLoadRequest(yaml_path=args.config))
    init_logging(config.logging)
    logger.info("Starting replay. script=%s", args.script)

    runtime = create_runtime(config)
    if args.restore_session:
        runtime.store.dispatch(restore_session(runtime.storage, token_key=config.persistence.token_key))

    state = await run_script(runtime, load_script(args.script))
    print(json.dumps(state_to_dict(state), indent=2, default=str))


async def _main_async() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if args.command == "replay":
        await _replay(args)


def main() -> None:
    try:
        asyncio.run(_main_async())
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")


if __name__ == "__main__":
    main()
