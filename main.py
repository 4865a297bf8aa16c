import logging
import sys
import json
import argparse

import yaml

from career_crush.config_loader import load_config, AppConfig
from career_crush.scorer.models import JobApplication, JobPreferences
from career_crush.scorer.service import MatchScoringService
from career_crush.scorer.weights import WEIGHT_KEYS, redistribute_weight, reset_weights

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig):
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format
    )


def load_document(path):
    """Read a YAML or JSON file (JSON is valid YAML)."""
    with open(path, "r") as f:
        return yaml.safe_load(f)


def load_mapping(path) -> dict:
    data = load_document(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")
    return data


def load_preferences(path, config: AppConfig) -> JobPreferences:
    data = load_mapping(path)
    return JobPreferences.from_row(
        data, default_weights=config.scorer.default_priority_weights.as_dict()
    )


def load_applications(path):
    data = load_document(path) or []
    if isinstance(data, dict):
        data = data.get("applications", [data])
    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise ValueError(f"Expected an application or a list of applications in {path}")
    return [JobApplication.from_row(row) for row in data]


def cmd_score(args, config: AppConfig):
    service = MatchScoringService(config.scorer)
    applications = load_applications(args.application)
    if not applications:
        raise ValueError(f"No application found in {args.application}")
    application = applications[0]
    preferences = load_preferences(args.preferences, config)
    breakdown = service.score(application, preferences)

    if args.json:
        print(json.dumps(breakdown.to_dict(), indent=2))
        return

    print(f"{application.label}: {breakdown.total_score} ({breakdown.tier.value})")
    for name, factor in breakdown.factors().items():
        print(f"  {name:<11} {factor.score:>3}  x{factor.weight:>3}%  {factor.reason}")


def cmd_rank(args, config: AppConfig):
    policy = config.ranking.model_copy(update={
        k: v for k, v in (("min_score", args.min_score), ("top_k", args.top_k)) if v is not None
    })
    service = MatchScoringService(config.scorer)
    ranked = service.rank(
        load_applications(args.applications),
        load_preferences(args.preferences, config),
        policy,
    )
    for position, item in enumerate(ranked, start=1):
        print(f"{position:>3}. {item.total_score:>3}  {item.application.label}")


def cmd_weights(args, config: AppConfig):
    defaults = config.scorer.default_priority_weights.as_dict()
    if args.weights_command == "reset":
        weights = reset_weights(defaults)
    else:
        current = load_mapping(args.weights) if args.weights else defaults
        weights = redistribute_weight(current or defaults, args.key, args.value)
    print(json.dumps(weights, indent=2))


def build_parser():
    parser = argparse.ArgumentParser(description="Career Crush Dream Job Match Score")
    parser.add_argument('--config', type=str, default="config.yaml",
                        help='Path to config.yaml')
    subparsers = parser.add_subparsers(dest="command", required=True)

    score_parser = subparsers.add_parser("score", help="Score one application")
    score_parser.add_argument('--application', '-a', required=True, help='Application file (YAML/JSON)')
    score_parser.add_argument('--preferences', '-p', required=True, help='Preferences file (YAML/JSON)')
    score_parser.add_argument('--json', action='store_true', help='Print the breakdown as JSON')

    rank_parser = subparsers.add_parser("rank", help="Rank applications by match score")
    rank_parser.add_argument('--applications', '-a', required=True, help='Applications file (YAML/JSON list)')
    rank_parser.add_argument('--preferences', '-p', required=True, help='Preferences file (YAML/JSON)')
    rank_parser.add_argument('--min-score', type=int, help='Drop applications scoring below this')
    rank_parser.add_argument('--top-k', type=int, help='Show at most this many')

    weights_parser = subparsers.add_parser("weights", help="Edit priority weights")
    weights_sub = weights_parser.add_subparsers(dest="weights_command", required=True)
    set_parser = weights_sub.add_parser("set", help="Set one weight and rebalance the others")
    set_parser.add_argument('key', choices=WEIGHT_KEYS)
    set_parser.add_argument('value', type=int)
    set_parser.add_argument('--weights', '-w', help='Current weights file (defaults if omitted)')
    weights_sub.add_parser("reset", help="Print the default weights")

    return parser


COMMANDS = {
    "score": cmd_score,
    "rank": cmd_rank,
    "weights": cmd_weights,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValueError) as e:
        configure_logging(AppConfig())
        logger.error(f"Could not load config {args.config}: {e}")
        return 1
    configure_logging(config)

    try:
        COMMANDS[args.command](args, config)
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
