#!/usr/bin/env python3
"""Debug script to print t_code_repo_info records for given tasks and builds."""

import argparse
import json
import sys

from apiquery.core.exceptions import ApiQueryError
from apiquery.core.logging import setup_logging
from apiquery.core.tracing import TracingContext
from apiquery.database.mongo import get_defect_database
from apiquery.services.code_repo_info_service import CodeRepoInfoService


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--task-id", type=int, action="append", default=[], required=True)
    parser.add_argument("--build-id", action="append", default=[], required=True)
    args = parser.parse_args(argv)

    setup_logging()
    TracingContext.get_or_create_correlation_id()

    try:
        service = CodeRepoInfoService(get_defect_database())
        items = service.get_code_repo_info(args.task_id, args.build_id)
    except ApiQueryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for item in items:
        print(json.dumps(item.model_dump(mode="json")))
    return 0


if __name__ == "__main__":
    sys.exit(main())
