"""Seed the per-namespace hosting parameters into SSM Parameter Store.

Usage:
    python scripts/seed_parameters.py --repo-url https://github.com/acme/site.git \
        --branch main --pipeline-name acme-site-main --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

from hostingkit.models.parameters import ParameterName
from hostingkit.services.namespace import parameter_key, resolve_namespace


def seed_parameters(ssm: Any, repo_url: str, branch_name: str,
                    values: dict[ParameterName, str]) -> list[str]:
    """Write each non-empty value under the namespace; returns the keys written."""
    namespace = resolve_namespace(repo_url, branch_name)
    written: list[str] = []
    for name, value in values.items():
        if not value:
            continue
        key = parameter_key(namespace, ParameterName(name).value)
        ssm.put_parameter(Name=key, Value=value, Type="String", Overwrite=True)
        print(f"  Wrote {key}")
        written.append(key)
    return written


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed hostingkit parameters")
    parser.add_argument("--repo-url", required=True)
    parser.add_argument("--branch", required=True)
    parser.add_argument("--pipeline-name", default="")
    parser.add_argument("--connection-arn", default="")
    parser.add_argument("--connection-name", default="")
    parser.add_argument("--connection-region", default="")
    parser.add_argument("--endpoint-url", default=None, help="LocalStack endpoint URL")
    parser.add_argument("--region", default="us-east-1")
    args = parser.parse_args()

    kwargs: dict = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url
    ssm = boto3.client("ssm", **kwargs)

    print(f"Seeding parameters for {args.repo_url}#{args.branch}...")
    keys = seed_parameters(ssm, args.repo_url, args.branch, {
        ParameterName.PIPELINE_NAME: args.pipeline_name,
        ParameterName.CONNECTION_ARN: args.connection_arn,
        ParameterName.CONNECTION_NAME: args.connection_name,
        ParameterName.CONNECTION_REGION: args.connection_region,
    })
    print(f"Done. {len(keys)} parameter(s) written.")


if __name__ == "__main__":
    main()
