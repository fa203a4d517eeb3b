import sys
import json
import logging
import argparse

from core.readiness import classify_status, generate_suggestions
from database.database import init_db
from database.uow import placement_uow
from web.backend.config import get_config
from web.backend.dependencies import get_db_manager
from web.backend.exceptions import ServiceException
from web.backend.models.responses import StatsResponse
from web.backend.services.readiness_service import ReadinessService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def cmd_init_db(args: argparse.Namespace) -> int:
    manager = get_db_manager()
    init_db(manager.engine)
    logger.info(f"Initialized database at {manager.engine.url}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from web.backend.app import main as run_web
    run_web()
    return 0


def cmd_score(args: argparse.Namespace) -> int:
    """Print the readiness report for one user as JSON."""
    config = get_config()
    manager = get_db_manager()

    with placement_uow(manager.SessionLocal) as uow:
        user = uow.users.get_by_email(args.email)
        if user is None:
            logger.error(f"No user registered with email {args.email}")
            return 1

        service = ReadinessService(uow, policy=config.readiness.invalid_mock_test_policy)
        try:
            result = service.get_readiness(user.id)
        except ServiceException as e:
            logger.error(f"Could not score user {user.id}: {e}")
            return 2

    report = StatsResponse.from_result(result).model_dump(by_alias=True)
    report['status'] = classify_status(result.total_score)
    report['suggestions'] = generate_suggestions(result.counts)
    print(json.dumps(report, indent=2))
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="PlacementIQ Main Driver")
    subparsers = parser.add_subparsers(dest='command', required=True)

    init_parser = subparsers.add_parser('init-db', help='Create database tables')
    init_parser.set_defaults(func=cmd_init_db)

    serve_parser = subparsers.add_parser('serve', help='Run the web API')
    serve_parser.set_defaults(func=cmd_serve)

    score_parser = subparsers.add_parser('score', help='Print the readiness score for a user')
    score_parser.add_argument('--email', required=True, help='Email of the registered user')
    score_parser.set_defaults(func=cmd_score)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
