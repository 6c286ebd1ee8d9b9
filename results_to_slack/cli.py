"""CLI entry point for the Robot Framework results to Slack action."""

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import SecretStr

from results_to_slack.config import ActionConfig, AlertConfig, parse_flag
from results_to_slack.delivery import SlackWebhookSender
from results_to_slack.models.outcome import Failed, NotificationOutcome, Sent, Skipped
from results_to_slack.notifier import ResultsNotifier
from results_to_slack.report import ReportUnavailableError, read_report

STATUS_SYMBOLS = {
    "sent": "✅",
    "skipped": "➖",
    "failed": "❌",
}


def outcome_status(outcome: NotificationOutcome) -> str:
    """Return the short status name of an outcome."""
    match outcome:
        case Sent():
            return "sent"
        case Skipped():
            return "skipped"
        case Failed():
            return "failed"


def log_outcome(log: logging.Logger, outcome: NotificationOutcome) -> None:
    """Log a one-line summary of the run's outcome."""
    status = outcome_status(outcome)
    symbol = STATUS_SYMBOLS[status]
    match outcome:
        case Sent(kind=kind, message=message):
            log.info("%s %s notification sent to %s", symbol, kind, message.channel)
        case Skipped(reason=reason) | Failed(reason=reason):
            log.info("%s %s: %s", symbol, status, reason)


def format_output(outcome: NotificationOutcome) -> dict[str, Any]:
    """Format the outcome for JSON output."""
    output: dict[str, Any] = {"status": outcome_status(outcome)}
    match outcome:
        case Sent(kind=kind, message=message):
            output["kind"] = kind
            output["message"] = message.to_payload()
        case Skipped(reason=reason) | Failed(reason=reason):
            output["reason"] = reason
    return output


def escape_command_data(value: str) -> str:
    """Escape a value for use in a GitHub workflow command."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


async def run(config: ActionConfig, *, annotate_errors: bool = False) -> int:
    """Run the notification step and return exit code."""
    log = logging.getLogger("results_to_slack")
    log.info("Running Robot Framework results to Slack")

    report_text: str | None
    try:
        report_text = read_report(config.report_path)
    except ReportUnavailableError as e:
        log.error("Error reading results file: %s", e)
        report_text = None
    else:
        if not report_text.strip():
            log.warning("Results file %s is empty", config.report_path)
            report_text = None

    async with SlackWebhookSender.from_config(config) as sender:
        notifier = ResultsNotifier(sender=sender, alerts=config.alerts)
        outcome = await notifier.notify(report_text)

    log_outcome(log, outcome)
    print(json.dumps(format_output(outcome), indent=2))

    if isinstance(outcome, Failed):
        if annotate_errors:
            print(f"::error::{escape_command_data(outcome.reason)}")
        return 1
    return 0


def input_default(env: Mapping[str, str], name: str) -> str | None:
    """Return a GitHub Actions input value, treating empty as unset."""
    return env.get(f"INPUT_{name.upper()}") or None


def build_parser(env: Mapping[str, str]) -> argparse.ArgumentParser:
    """Build the argument parser, defaulting options to action inputs."""

    def required(name: str) -> dict[str, Any]:
        default = input_default(env, name)
        return {"default": default, "required": default is None}

    parser = argparse.ArgumentParser(
        description="Post Robot Framework test results to a Slack channel"
    )
    parser.add_argument(
        "--output-xml-path",
        type=Path,
        help="Path to the Robot Framework output.xml",
        **required("output_xml_path"),
    )
    parser.add_argument(
        "--slack-webhook-url",
        help="Slack incoming webhook URL",
        **required("slack_webhook_url"),
    )
    parser.add_argument(
        "--slack-channel",
        help="Channel to post to",
        **required("slack_channel"),
    )
    parser.add_argument(
        "--slack-username",
        default=input_default(env, "slack_username") or "",
        help="Display name of the message author",
    )
    parser.add_argument(
        "--slack-icon",
        default=input_default(env, "slack_icon") or "",
        help="Emoji used as the author icon (e.g. :robot_face:)",
    )
    parser.add_argument(
        "--slack-header",
        default=input_default(env, "slack_header") or "",
        help="Header text of the results attachment",
    )
    for flag, help_text in (
        ("alert_channel_on_failure", "Notify when tests failed"),
        ("alert_channel_on_skipped", "Notify when tests were skipped"),
        ("alert_channel_on_success", "Notify when all tests passed"),
        ("alert_channel_on_no_output", "Notify when no report was found"),
    ):
        parser.add_argument(
            f"--{flag.replace('_', '-')}",
            type=parse_flag,
            default=parse_flag(input_default(env, flag)),
            metavar="true|false",
            help=help_text,
        )
    parser.add_argument(
        "--no-output-found-message",
        default=input_default(env, "no_output_found_message") or "",
        help="Message posted when no report was found",
    )
    parser.add_argument(
        "--run-number",
        default=env.get("GITHUB_RUN_NUMBER") or None,
        help="CI run number shown in the message title",
    )
    parser.add_argument(
        "--annotate-errors",
        type=parse_flag,
        default=parse_flag(env.get("GITHUB_ACTIONS")),
        metavar="true|false",
        help="Emit GitHub workflow error annotations on failure",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ActionConfig:
    """Build the action configuration from parsed arguments."""
    return ActionConfig(
        report_path=args.output_xml_path,
        webhook_url=SecretStr(args.slack_webhook_url),
        alerts=AlertConfig(
            channel=args.slack_channel,
            username=args.slack_username,
            icon=args.slack_icon,
            header=args.slack_header,
            notify_on_failure=args.alert_channel_on_failure,
            notify_on_skipped=args.alert_channel_on_skipped,
            notify_on_success=args.alert_channel_on_success,
            notify_on_no_output=args.alert_channel_on_no_output,
            no_output_found_message=args.no_output_found_message,
            run_number=args.run_number,
        ),
    )


def main() -> None:
    """CLI entry point."""
    args = build_parser(os.environ).parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = config_from_args(args)
    exit_code = asyncio.run(run(config, annotate_errors=args.annotate_errors))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
