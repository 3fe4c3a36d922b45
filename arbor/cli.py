"""Command-line interface for Arbor."""

import logging
import sys

import click

from .classifier.config import EngineConfig
from .classifier.engine import GraphClassifier
from .classifier.errors import GraphTooLargeError
from .output.formatter import (
    format_classification_result,
    format_features,
    format_model_info,
)
from .schema.errors import GraphLoadError, InvalidGraphError
from .schema.loader import load_graph_file

DEFAULT_MAX_NODES = 500


def _load_graph(graph_file: str):
    """Load a graph file, exiting with code 2 on failure."""
    try:
        return load_graph_file(graph_file)
    except GraphLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except InvalidGraphError as e:
        click.echo(f"Invalid graph: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)


@click.group()
@click.version_option(package_name="arbor")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """Arbor: classify graphs as Tree, Cyclic or DAG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--probabilities",
    "probability_mode",
    type=click.Choice(["fixed", "votes"]),
    default="fixed",
    help="How the trained model reports probabilities",
)
@click.option(
    "--max-nodes",
    type=click.IntRange(min=1),
    envvar="ARBOR_MAX_NODES",
    default=DEFAULT_MAX_NODES,
    show_default=True,
    help="Reject graphs with more nodes than this",
)
def classify(
    graph_file: str,
    output_format: str,
    probability_mode: str,
    max_nodes: int,
):
    """Classify a graph file as Tree, Cyclic or DAG.

    GRAPH_FILE is a YAML or JSON file with `nodes` and `edges` lists.

    Exit codes:
      0 - Classification succeeded
      2 - File, graph or size error
    """
    graph = _load_graph(graph_file)

    config = EngineConfig(probability_mode=probability_mode, max_nodes=max_nodes)
    classifier = GraphClassifier(config)

    try:
        result = classifier.classify(graph)
    except GraphTooLargeError as e:
        click.echo(f"Graph too large: {e}", err=True)
        sys.exit(2)

    click.echo(format_classification_result(result, output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def features(graph_file: str, output_format: str):
    """Print the structural features of a graph file.

    GRAPH_FILE is a YAML or JSON file with `nodes` and `edges` lists.
    """
    from .graph.features import extract_features

    graph = _load_graph(graph_file)
    click.echo(format_features(extract_features(graph), output_format))  # type: ignore
    sys.exit(0)


@main.command("model-info")
@click.option(
    "--train",
    is_flag=True,
    default=False,
    help="Train the model before reporting",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def model_info(train: bool, output_format: str):
    """Show the state of the trained classifier."""
    classifier = GraphClassifier()
    if train:
        classifier.train_model()

    click.echo(format_model_info(classifier.get_model_info(), output_format))  # type: ignore
    sys.exit(0)


if __name__ == "__main__":
    main()
