#!/usr/bin/env python3
"""
Tayari rules engine driver.

    python main.py init-db
    python main.py seed-badges
    python main.py match 42          # score every job post for learner 42
    python main.py evaluate 42       # award any newly qualified badges
    python main.py badges 42         # list badges with ownership status
    python main.py points 42         # total learner points
"""
import argparse
import json
import logging
import sys

from core.config_loader import load_config, AppConfig
from core.exceptions import LearnerNotFoundError
from core.matcher import MatchScorer, JobPosting
from core.badges import BadgeEvaluator, seed_default_badges, list_badges_with_status
from core.points import PointService
from database import database
from database.init_db import init_db
from database.uow import rules_uow

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format
    )


def run_match(config: AppConfig, learner_id: int) -> list:
    with rules_uow() as uow:
        scorer = MatchScorer(uow.aptitude, config.matching)
        jobs = [JobPosting.from_orm(job) for job in uow.job_posts.list_jobs()]
        return [view.to_dict() for view in scorer.match_jobs(jobs, learner_id)]


def run_evaluate(config: AppConfig, learner_id: int) -> list:
    with rules_uow() as uow:
        evaluator = BadgeEvaluator(uow.users, uow.activity, uow.badges, config.badges)
        return sorted(evaluator.evaluate(learner_id))


def run_badges(learner_id: int) -> list:
    with rules_uow() as uow:
        uow.users.get_learner(learner_id)
        return list_badges_with_status(uow.badges, learner_id)


def run_points(config: AppConfig, learner_id: int) -> dict:
    with rules_uow() as uow:
        uow.users.get_learner(learner_id)
        service = PointService(uow.points, config.points)
        return {'learner_id': learner_id, 'points': service.total_points(learner_id)}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tayari rules engine driver")
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('init-db', help='Create database tables')
    sub.add_parser('seed-badges', help='Create the default badge catalog')
    for name, help_text in (
        ('match', 'Score every job post (any status) for a learner'),
        ('evaluate', 'Award newly qualified badges to a learner'),
        ('badges', 'List badges with ownership status for a learner'),
        ('points', 'Show a learner\'s total points'),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument('learner_id', type=int)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_logging(config)
    database.configure(config.database.url)

    try:
        if args.command == 'init-db':
            init_db()
            return 0
        if args.command == 'seed-badges':
            init_db()
            with rules_uow() as uow:
                created = seed_default_badges(uow.badges)
            logger.info(f"Badge catalog ready ({created} created)")
            return 0

        if args.command == 'match':
            output = run_match(config, args.learner_id)
        elif args.command == 'evaluate':
            output = run_evaluate(config, args.learner_id)
        elif args.command == 'badges':
            output = run_badges(args.learner_id)
        else:
            output = run_points(config, args.learner_id)
    except LearnerNotFoundError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(output, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
