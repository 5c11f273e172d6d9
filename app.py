"""Command line driver: logic-gate demo and CSV training built with Typer."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import typer

# Ensure top-level package import works even when running as a script
sys.path.insert(0, os.path.dirname(__file__))

from ml.config import Settings, settings
from ml.datasets import input_vectors, truth_table
from ml.errors import PerceptronError
from ml.perceptron import Perceptron
from ml.utils import dimensions_of, load_training_set
from ui.plots import plot_training_history

logger = logging.getLogger(__name__)

app = typer.Typer(help="Train a single-layer perceptron on logic gates or CSV data.")

DEMO_GATES = ("AND", "OR", "XOR")


def _format_vector(x) -> str:
    return "[" + ",".join(f"{int(v)}" if float(v).is_integer() else f"{v:g}" for v in x) + "]"


def _echo_progress(iteration: int, errors: int) -> None:
    typer.echo(f"training iteration # {iteration}, errors found: {errors}")


def _build_perceptron(dimensions, learning_rate, threshold) -> Perceptron:
    try:
        return Perceptron(dimensions, learning_rate, threshold)
    except PerceptronError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _resolve_settings(**options) -> Settings:
    try:
        return settings(**options)
    except PerceptronError as exc:
        raise typer.BadParameter(str(exc)) from exc


def run_demo(perceptron: Perceptron, inputs: int, limit: int, plot_dir: Optional[Path] = None) -> None:
    """Train one perceptron on AND, OR then XOR, reusing its weights between gates."""
    probes = input_vectors(inputs)
    for i, gate in enumerate(DEMO_GATES):
        if i:
            typer.echo("\n")
        typer.echo(f"Training perceptron for logic {gate}")
        training_set = truth_table(gate, inputs)
        perceptron.learn(training_set, limit=limit, callback=_echo_progress)
        typer.echo("")
        for x in probes:
            typer.echo(f"output for {_format_vector(x)}: {perceptron.output(x)}")
        if plot_dir is not None and perceptron.history:
            path = plot_training_history(perceptron.history, plot_dir / f"{gate.lower()}.png",
                                         title=f"Logic {gate}")
            logger.info("wrote %s", path)


@app.callback()
def main_options(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING...)."),
):
    """Train a single-layer perceptron on logic gates or CSV data."""
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}")
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")


@app.command()
def demo(
    inputs: Optional[int] = typer.Option(None, help="Number of gate inputs (default 4)."),
    learning_rate: Optional[float] = typer.Option(None, help="Learning rate (default 0.05)."),
    threshold: Optional[float] = typer.Option(None, help="Output threshold (default 0.5)."),
    limit: Optional[int] = typer.Option(None, help="Maximum training iterations per gate (default 200)."),
    plot_dir: Optional[Path] = typer.Option(None, help="Directory for per-gate error charts."),
):
    """Train AND, OR and XOR in sequence on one shared perceptron."""
    s = _resolve_settings(inputs=inputs, learning_rate=learning_rate, threshold=threshold, limit=limit)
    if s.inputs <= 0:
        raise typer.BadParameter("--inputs must be positive")
    perceptron = _build_perceptron(s.inputs, s.learning_rate, s.threshold)
    try:
        run_demo(perceptron, s.inputs, s.limit, plot_dir)
    except PerceptronError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def train(
    dataset: Path = typer.Argument(..., help="CSV file with rows x1,...,xn,y."),
    learning_rate: Optional[float] = typer.Option(None, help="Learning rate (default 0.05)."),
    threshold: Optional[float] = typer.Option(None, help="Output threshold (default 0.5)."),
    limit: Optional[int] = typer.Option(None, help="Maximum training iterations (default 200)."),
    plot: Optional[Path] = typer.Option(None, help="Write the error chart to this PNG file."),
):
    """Train a fresh perceptron on a CSV training set."""
    s = _resolve_settings(learning_rate=learning_rate, threshold=threshold, limit=limit)
    try:
        examples = load_training_set(dataset)
    except PerceptronError as exc:
        raise typer.BadParameter(str(exc), param_hint="DATASET") from exc
    if not examples:
        raise typer.BadParameter("training set is empty", param_hint="DATASET")

    perceptron = _build_perceptron(dimensions_of(examples), s.learning_rate, s.threshold)
    try:
        perceptron.learn(examples, limit=s.limit, callback=_echo_progress)
    except PerceptronError as exc:
        raise typer.BadParameter(str(exc)) from exc

    errors = perceptron.test(examples)
    typer.echo(f"weights: {_format_vector(perceptron.weights)}")
    typer.echo(f"errors: {errors}")
    if plot is not None and perceptron.history:
        plot_training_history(perceptron.history, plot, title=dataset.name)
        typer.echo(f"Saved {plot}")
    if errors:
        raise typer.Exit(code=1)


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
