"""
Command Line Interface for WiFi Grader
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from wifi_grader import __version__
from wifi_grader.application.use_cases.network_grading import NetworkGradingUseCase
from wifi_grader.config.manager import ConfigurationManager
from wifi_grader.config.settings import WifiGraderSettings
from wifi_grader.core.exceptions import WifiGraderError
from wifi_grader.core.services.scoring import ScoreBreakdown
from wifi_grader.infrastructure.reporting import ReportWriter, graded_row
from wifi_grader.infrastructure.scanner import FileScanner, create_scanner
from wifi_grader.utils.logger import configure_logging

logger = logging.getLogger(__name__)

# Create the main app
app = typer.Typer(
    name="wifi-grader",
    help="WiFi network security grader",
    add_completion=False
)

# Status and error messages go to stderr; stdout carries JSON only
err_console = Console(stderr=True)

# Sub-commands
config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")


class CliState:
    """Settings shared by the commands of one invocation"""

    def __init__(self, manager: ConfigurationManager, settings: WifiGraderSettings):
        self.manager = manager
        self.settings = settings


class InspectSection(str, Enum):
    """Analysis sections the inspect command can emit"""
    ALL = "all"
    SECURITY = "security"
    PERFORMANCE = "performance"
    THREATS = "threats"


SECURITY_FIELDS = ('protocol', 'score', 'grade', 'risk_level', 'features', 'protocol_risks')
PERFORMANCE_FIELDS = ('signal_strength', 'frequency', 'channel', 'channel_width', 'max_data_rate')


def _fail(message: str) -> None:
    err_console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def _emit(payload) -> None:
    typer.echo(json.dumps(payload, indent=2, default=str))


def _build_use_case(settings: WifiGraderSettings, input_file: Optional[Path],
                    strict: bool) -> NetworkGradingUseCase:
    if input_file is not None:
        scanner = FileScanner(input_file, strict=strict or settings.scanner.strict)
    else:
        scanner = create_scanner(settings.scanner)
    return NetworkGradingUseCase.from_settings(settings, scanner=scanner)


def _breakdown_dict(breakdown: ScoreBreakdown) -> dict:
    return {
        'components': [
            {
                'name': component.name,
                'raw_value': component.raw_value,
                'weight': component.weight,
                'contribution': round(component.contribution, 2),
                'reason': component.reason,
            }
            for component in breakdown.components
        ],
        'weighted_total': round(breakdown.weighted_total, 2),
        'score': breakdown.score,
    }


def _inspect_payload(graded, assessment, breakdown, section: InspectSection) -> dict:
    payload = {'network': graded_row(graded)}
    analysis = assessment.model_dump(mode='json')

    if section == InspectSection.ALL:
        payload.update({
            'observation': graded.observation.model_dump(mode='json'),
            'assessment': analysis,
            'breakdown': _breakdown_dict(breakdown),
        })
    elif section == InspectSection.SECURITY:
        payload['security'] = {name: analysis[name] for name in SECURITY_FIELDS}
        payload['breakdown'] = _breakdown_dict(breakdown)
    elif section == InspectSection.PERFORMANCE:
        observation = graded.observation.model_dump(mode='json')
        performance = {name: observation[name] for name in PERFORMANCE_FIELDS}
        performance.update(band=analysis['band'], signal_quality=analysis['signal_quality'])
        payload['performance'] = performance
    else:
        payload['threats'] = analysis['threats']
    return payload


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging with per-score traces"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file path"),
):
    """WiFi Grader - score, grade and rank wireless networks by security"""
    try:
        manager = ConfigurationManager(config)
        settings = manager.to_settings()
    except WifiGraderError as e:
        _fail(f"Configuration error: {e}")

    log_settings = settings.logging
    if verbose or settings.debug:
        log_settings = log_settings.model_copy(update={'level': 'DEBUG'})
        settings = settings.model_copy(update={'logging': log_settings})
    configure_logging(log_settings, console=err_console)

    ctx.obj = CliState(manager, settings)


@app.command("grade")
def grade(
    ctx: typer.Context,
    input_file: Optional[Path] = typer.Argument(None, help="JSON file with network records"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the report to a .json or .csv file"),
    strict: bool = typer.Option(False, "--strict", help="Fail on the first malformed record"),
):
    """Grade and rank networks, printing a JSON report"""
    state: CliState = ctx.obj
    try:
        use_case = _build_use_case(state.settings, input_file, strict)
        graded = use_case.scan_and_grade()

        writer = ReportWriter(state.settings.report.output_directory, state.settings.report.format)
        if output is not None:
            path = writer.write(graded, output)
            _emit({'report': str(path), 'count': len(graded)})
        else:
            typer.echo(writer.to_json(graded))
    except WifiGraderError as e:
        logger.debug("Grading failed", exc_info=True)
        _fail(f"Grading failed: {e}")


@app.command("inspect")
def inspect(
    ctx: typer.Context,
    input_file: Optional[Path] = typer.Argument(None, help="JSON file with network records"),
    index: int = typer.Option(0, "--index", "-i", min=0, help="Position of the network in the input"),
    section: InspectSection = typer.Option(
        InspectSection.ALL, "--section", "-s", case_sensitive=False, help="Analysis section to show"
    ),
    strict: bool = typer.Option(False, "--strict", help="Fail on the first malformed record"),
):
    """Show the score breakdown and assessment of one network as JSON"""
    state: CliState = ctx.obj
    try:
        use_case = _build_use_case(state.settings, input_file, strict)
        observations = use_case.scanner.scan()
        if index >= len(observations):
            _fail(f"No network at index {index} ({len(observations)} loaded)")

        target = observations[index]
        rank = next(
            position
            for position, (observation, _) in enumerate(use_case.ranker.rank_with_scores(observations), start=1)
            if observation is target
        )
        graded, assessment, breakdown = use_case.inspect(target, rank=rank)
    except WifiGraderError as e:
        logger.debug("Inspection failed", exc_info=True)
        _fail(f"Inspection failed: {e}")

    _emit(_inspect_payload(graded, assessment, breakdown, section))


@config_app.command("show")
def config_show(ctx: typer.Context):
    """Show the effective configuration as JSON"""
    state: CliState = ctx.obj
    _emit(state.manager.to_dict())


@config_app.command("validate")
def config_validate(ctx: typer.Context):
    """Validate the effective configuration"""
    state: CliState = ctx.obj
    try:
        state.manager.validate_configuration()
    except WifiGraderError as e:
        _fail(str(e))
    _emit({'valid': True})


@app.command("version")
def version():
    """Show version information"""
    _emit({'name': 'wifi-grader', 'version': __version__})


if __name__ == "__main__":
    app()
