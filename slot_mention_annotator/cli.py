"""Command line entry-point for slot mention annotation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, TextIO

import click
import yaml

from .annotator import AnnotatorConfig, SlotMentionAnnotator
from .models import AnnotationResult, Sentence
from .utils.config import ConfigManager
from .utils.logging import setup_logging

logger = logging.getLogger("slot_mention_annotator.cli")


def _load_sentences(document: Any) -> list[Sentence]:
    """Accept either ``{"sentences": [...]}`` or a bare list of sentences."""
    if isinstance(document, dict):
        document = document.get("sentences")
    if not isinstance(document, list):
        raise click.ClickException("Input must be a list of sentences or an object with a 'sentences' list")
    return [Sentence.model_validate(item) for item in document]


def _format_output(result: AnnotationResult) -> dict:
    """Format annotation result for JSON output."""
    sentences = []
    for annotation in result.sentences:
        sentences.append({
            "sentence_id": annotation.sentence_id,
            "slot_mentions": [
                {
                    "id": slot.mention_id,
                    "span": [slot.extent.start, slot.extent.end],
                    "ner_type": slot.ner_type,
                    "ner_tag": slot.ner_tag.value,
                    "normalized_name": slot.normalized_name,
                }
                for slot in annotation.slot_mentions
            ],
            "modifiers": [[span.start, span.end] for span in annotation.modifier_spans],
            "coreference_rewrites": annotation.coreference_rewrites,
            "ner": [token.ner for token in annotation.tokens],
        })

    return {
        "sentences": sentences,
        "meta": result.meta,
    }


@click.command()
@click.option("--input", "-i", type=click.File("r"), default="-", help="JSON sentences file (defaults to stdin)")
@click.option("--output", "-o", type=click.File("w"), default="-", help="Output destination (defaults to stdout)")
@click.option("--config", "-c", "config_path", type=click.Path(path_type=Path), help="YAML configuration file")
@click.option("--gazetteer", type=click.Path(exists=True, path_type=Path), help="YAML gazetteer with cities/regions/countries")
@click.option("--max-distance", type=int, help="Maximum token distance between a slot and a primary entity")
@click.option("--no-modifiers", is_flag=True, help="Skip the modifier pass")
@click.option("--workers", type=int, help="Number of sentences annotated concurrently")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(
    input: TextIO,
    output: TextIO,
    config_path: Optional[Path],
    gazetteer: Optional[Path],
    max_distance: Optional[int],
    no_modifiers: bool,
    workers: Optional[int],
    verbose: bool,
) -> None:
    """Find candidate slot mentions in tagged, parsed sentences."""

    setup_logging(verbose=verbose)

    raw = input.read()
    if not raw.strip():
        raise click.ClickException("No sentences supplied")

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Input is not valid JSON: {e}")

    try:
        manager = ConfigManager(config_path)
        if gazetteer is not None:
            manager.set("gazetteer.path", str(gazetteer))
        if max_distance is not None:
            manager.set("slots.max_token_distance", max_distance)
        if no_modifiers:
            manager.set("modifiers.enabled", False)
        if workers is not None:
            manager.set("processing.workers", workers)

        sentences = _load_sentences(document)
        annotator = SlotMentionAnnotator(AnnotatorConfig.from_config_manager(manager))
        result = annotator.annotate(sentences)
    except (ValueError, OSError, yaml.YAMLError) as e:
        raise click.ClickException(str(e))

    if verbose:
        logger.info(
            f"Annotated {result.meta['sentences_count']} sentences, "
            f"{result.meta['slot_mentions_count']} slot mentions"
        )

    json.dump(_format_output(result), output, indent=2)
    output.write("\n")


if __name__ == "__main__":  # pragma: no cover
    main()
