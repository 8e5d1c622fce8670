import argparse
import os
import sys
import time
import traceback

from .utils.constants import (
    DEFAULT_DEPLOYMENTS_LOG_PATH,
    DEFAULT_ENV_PATH,
    DEFAULT_MANIFEST_PATH,
    DEFAULT_TIMEOUT_MULTIPLIER,
    START_TIME,
)
from .utils.credentials import load_credentials
from .utils.custom_exceptions import BaseCustomException, ConfigError
from .utils.deployment_log import DeploymentLog
from .utils.logger import logger
from .utils.runner import process_manifest

__version__ = "0.1.0"

MANIFEST_EXTENSIONS = (".json", ".yaml", ".yml")


def connect_network(credentials, timeout_multiplier: int):
    # the SDK starts a JVM on import, verify-only runs never load it
    from .utils.network import HederaNetwork

    return HederaNetwork.connect(credentials, timeout_multiplier)


def collect_manifest_paths(path: str) -> list[str]:
    if os.path.isfile(path):
        return [path]
    if os.path.isdir(path):
        return [
            os.path.join(path, filename)
            for filename in sorted(os.listdir(path))
            if filename.lower().endswith(MANIFEST_EXTENSIONS)
            and os.path.isfile(os.path.join(path, filename))
        ]
    logger.error(f"Specified manifest path {path} not found")
    sys.exit(1)


def parse_arguments():
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--version", "-V", action="store_true", help="Display version information"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_MANIFEST_PATH,
        help="Path to a manifest or a directory with manifests",
    )
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_PATH,
        help="Dotfile with OPERATOR_ACCOUNT_ID, OPERATOR_KEY and HEDERA_NETWORK",
    )
    parser.add_argument(
        "--deployments-log",
        default=DEFAULT_DEPLOYMENTS_LOG_PATH,
        help="Append-only file recording every created contract, account and token",
    )
    parser.add_argument(
        "--timeout-multiplier",
        type=int,
        default=DEFAULT_TIMEOUT_MULTIPLIER,
        help="Multiplier for the SDK's default request timeout and max attempts",
    )
    parser.add_argument(
        "--skip-deploy",
        help="Only verify, using verify.contract_id from the manifests",
        action="store_true",
    )
    parser.add_argument(
        "--no-verify",
        help="Don't submit sources to the verification server",
        action="store_true",
    )
    parser.add_argument(
        "--yes",
        "-Y",
        help="If set don't ask for input before processing each manifest",
        action="store_true",
    )
    return parser.parse_args()


def main():
    args = parse_arguments()
    if args.version:
        print(f"hedeploy {__version__}")
        return
    logger.info("Welcome to hedeploy!")
    logger.divider()

    manifest_paths = collect_manifest_paths(args.path)
    logger.okay("Manifests", len(manifest_paths))

    network = None
    report = []
    try:
        credentials = load_credentials(args.env_file)
        if not args.skip_deploy:
            network = connect_network(credentials, args.timeout_multiplier)
        deployment_log = DeploymentLog(args.deployments_log)

        for manifest_path in manifest_paths:
            if not args.yes:
                input(f"Press Enter to process {manifest_path}...")
            try:
                process_manifest(
                    manifest_path,
                    network,
                    credentials.network,
                    deployment_log,
                    skip_deploy=args.skip_deploy,
                    skip_verify=args.no_verify,
                    rows=report,
                )
            except ConfigError:
                raise
            except BaseCustomException as custom_exc:
                logger.error(custom_exc.message)
                traceback.print_exc()
    except ConfigError as config_err:
        logger.error(config_err.message)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt by user")
    finally:
        if network is not None:
            network.close()

    logger.divider()
    logger.report_table(
        [[index + 1, *row] for index, row in enumerate(report)]
    )

    execution_time = time.time() - START_TIME
    logger.okay(f"Done in {round(execution_time, 3)}s ✨")


if __name__ == "__main__":
    main()
