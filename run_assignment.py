"""
Simple Okta group assignment runner.
Drives the invoke/error/halt hooks the way the job framework would.
"""
import argparse
import json
import sys

from okta_group_assign import OktaAssignmentError, run_error_sync, run_halt_sync, run_invoke_sync
from okta_group_assign.config import ConfigLoader


def run_assignment(params, context) -> bool:
    try:
        result = run_invoke_sync(params, context)
    except OktaAssignmentError as exc:
        try:
            result = run_error_sync({**params, "error": exc}, context)
        except OktaAssignmentError as final_exc:
            print(f"Assignment failed: {final_exc}", file=sys.stderr)
            return False
    print(json.dumps(result, indent=2))
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Assign an Okta user to a group")
    parser.add_argument("--user-id")
    parser.add_argument("--group-id")
    parser.add_argument("--okta-domain", help="Defaults to OKTA_DOMAIN")
    parser.add_argument("--config-file", default="configs/config.json")
    parser.add_argument("--environment", default=None)
    parser.add_argument("--halt", action="store_true", help="Send a halt instead of assigning")
    parser.add_argument("--reason", default=None, help="Halt reason")
    args = parser.parse_args(argv)

    try:
        config = ConfigLoader(config_file=args.config_file, environment=args.environment)
    except OktaAssignmentError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1
    config.setup_logging()
    context = config.build_context()

    params = {
        "userId": args.user_id,
        "groupId": args.group_id,
        "oktaDomain": args.okta_domain or context.env.get("OKTA_DOMAIN"),
    }

    if args.halt:
        print(json.dumps(run_halt_sync({**params, "reason": args.reason}, context), indent=2))
        return 0

    return 0 if run_assignment(params, context) else 1


if __name__ == "__main__":
    sys.exit(main())
