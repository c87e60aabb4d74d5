"""hostingkit command line.

Usage:
    hostingkit --repo-url https://github.com/acme/site.git --branch main status
    hostingkit deploy --request-token 3f1c...
    hostingkit show
    hostingkit bucket-exists my-bucket --strict
"""

from __future__ import annotations

import argparse
import logging
import sys

from botocore.exceptions import BotoCoreError

from hostingkit.aws import AwsClients, create_clients
from hostingkit.core.config import AppSettings
from hostingkit.core.exceptions import HostingKitError
from hostingkit.core.log import configure_logging
from hostingkit.models.hosting import HostingConfiguration
from hostingkit.models.parameters import ParameterName
from hostingkit.services.configuration import build_hosting_configuration
from hostingkit.services.connectivity import CONNECTIVITY_MESSAGE, ConnectivityProber
from hostingkit.services.namespace import main_stack_name
from hostingkit.services.parameter_store import ParameterStore
from hostingkit.services.pipeline_status import PipelineStatusAggregator
from hostingkit.services.trigger import ExecutionTrigger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hostingkit", description="Drive static-site hosting deployments")
    parser.add_argument("--repo-url", help="Source repository URL")
    parser.add_argument("--branch", help="Branch to deploy")
    parser.add_argument("--framework", help="Site framework")
    parser.add_argument("--domain", help="Domain name")
    parser.add_argument("--region", help="AWS region")
    parser.add_argument("--endpoint-url", help="AWS endpoint override (e.g. LocalStack)")
    parser.add_argument("--log-level", help="Logging level (default from HOSTINGKIT_LOG_LEVEL)")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("status", help="Show the aggregate pipeline status")
    deploy = sub.add_parser("deploy", help="Start the pipeline unless it is already running")
    deploy.add_argument("--request-token", help="Idempotency token forwarded to CodePipeline")
    sub.add_parser("show", help="Show the namespace, stack name and parameter keys")
    bucket = sub.add_parser("bucket-exists", help="Check whether a bucket exists")
    bucket.add_argument("bucket_name")
    bucket.add_argument("--strict", action="store_true", help="Fail on errors other than not-found")
    return parser


def _settings_from_args(args: argparse.Namespace) -> AppSettings:
    settings = AppSettings()
    if args.region:
        settings.aws.region = args.region
    if args.endpoint_url:
        settings.aws.endpoint_url = args.endpoint_url
    if args.log_level:
        settings.log_level = args.log_level
    return settings


def run_command(args: argparse.Namespace, config: HostingConfiguration, clients: AwsClients) -> None:
    """Dispatch one subcommand; typed errors propagate to ``main``."""
    params = ParameterStore(clients.parameters, config)

    if args.command == "status":
        status = PipelineStatusAggregator(params, clients.pipelines).get_status()
        print(f"{status.status} ({status.stage_name})")
    elif args.command == "deploy":
        result = ExecutionTrigger(params, clients.pipelines).start(args.request_token)
        print(result.message)
    elif args.command == "show":
        print(f"namespace:  {params.namespace}")
        print(f"main stack: {main_stack_name(config)}")
        for name in ParameterName:
            print(f"{name.value}: {params.key_for(name)}")
    elif args.command == "bucket-exists":
        print("true" if clients.buckets.exists(args.bucket_name) else "false")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = _settings_from_args(args)
    configure_logging(settings.log_level)

    try:
        config = build_hosting_configuration(
            settings.hosting,
            repo_url=args.repo_url,
            branch_name=args.branch,
            framework=args.framework,
            domain_name=args.domain,
        )
        try:
            clients = create_clients(settings, strict_bucket_probe=getattr(args, "strict", False))
        except BotoCoreError as exc:
            logger.debug("Client setup failed: %s", exc)
            print(CONNECTIVITY_MESSAGE, file=sys.stderr)
            return 1

        ConnectivityProber(clients.identity).check()
        run_command(args, config, clients)
    except HostingKitError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
