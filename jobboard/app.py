import argparse
import json
from typing import Any, Dict

from . import __version__
from .database import get_session, init_database
from .env import database_url, load_env
from .errors import AppError
from .logger import reset_logger
from .repositories import JobRepository
from .schema import validate_job_new, validate_job_update


def _print_json(value: Any) -> None:
    print(json.dumps(value, indent=2))


def _check(errors: list) -> None:
    if errors:
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)


def _run(args: argparse.Namespace, action):
    session = get_session(args.db_url)
    try:
        return action(JobRepository(session))
    except AppError as e:
        raise SystemExit(f"Error ({e.status}): {e.message}")
    finally:
        session.close()


def cmd_init_db(args: argparse.Namespace) -> None:
    init_database(args.db_url)
    print(f"Initialized database: {args.db_url}")


def cmd_create(args: argparse.Namespace) -> None:
    data: Dict[str, Any] = {"title": args.title, "companyHandle": args.company_handle}
    if args.salary is not None:
        data["salary"] = args.salary
    if args.equity is not None:
        data["equity"] = args.equity
    _check(validate_job_new(data))
    _print_json(_run(args, lambda repo: repo.create(data)))


def cmd_list(args: argparse.Namespace) -> None:
    jobs = _run(args, lambda repo: repo.find_all())
    if not jobs:
        print("No jobs.")
        return
    _print_json(jobs)


def cmd_get(args: argparse.Namespace) -> None:
    _print_json(_run(args, lambda repo: repo.get(args.id)))


def cmd_update(args: argparse.Namespace) -> None:
    data = {
        k: v
        for k, v in (("title", args.title), ("salary", args.salary), ("equity", args.equity))
        if v is not None
    }
    _check(validate_job_update(data))
    _print_json(_run(args, lambda repo: repo.update(args.id, data)))


def cmd_remove(args: argparse.Namespace) -> None:
    _run(args, lambda repo: repo.remove(args.id))
    _print_json({"deleted": args.id})


def main(argv=None):
    # Load .env if present (DATABASE_URL, LOG_LEVEL, LOG_DIR)
    load_env()
    # Rebuild the logger so LOG_LEVEL and LOG_DIR from .env apply
    reset_logger()
    parser = argparse.ArgumentParser(prog="jobboard", description="Manage job postings")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--db-url", default=database_url(), help="SQLAlchemy database URL (default: DATABASE_URL or sqlite:///data/jobs.db)")

    subparsers = parser.add_subparsers(dest="command")
    ini = subparsers.add_parser("init-db", help="Create the companies and jobs tables")
    ini.set_defaults(func=cmd_init_db)

    crt = subparsers.add_parser("create", help="Create a job for an existing company")
    crt.add_argument("--title", required=True, help="Job title")
    crt.add_argument("--company-handle", required=True, help="Handle of the owning company")
    crt.add_argument("--salary", type=int, help="Yearly salary")
    crt.add_argument("--equity", help="Equity as a decimal string, e.g. 0.05")
    crt.set_defaults(func=cmd_create)

    lst = subparsers.add_parser("list", help="List all jobs ordered by title")
    lst.set_defaults(func=cmd_list)

    get = subparsers.add_parser("get", help="Show one job")
    get.add_argument("id", type=int, help="Job id")
    get.set_defaults(func=cmd_get)

    upd = subparsers.add_parser("update", help="Change title, salary or equity of a job")
    upd.add_argument("id", type=int, help="Job id")
    upd.add_argument("--title", help="New title")
    upd.add_argument("--salary", type=int, help="New salary")
    upd.add_argument("--equity", help="New equity")
    upd.set_defaults(func=cmd_update)

    rem = subparsers.add_parser("remove", help="Delete a job")
    rem.add_argument("id", type=int, help="Job id")
    rem.set_defaults(func=cmd_remove)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
