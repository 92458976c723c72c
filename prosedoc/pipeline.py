"""Batch pipeline: build documents for every record of an input file."""

import json
import logging
import re
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd
from tqdm import tqdm

from .config import PipelineConfig
from .document import Document, new_document
from .model import Model

logger = logging.getLogger(__name__)

SENTENCE_COLUMNS = ["document_id", "sentence_index", "text", "start", "end"]
TOKEN_COLUMNS = ["document_id", "token_index", "text", "start", "end", "tag", "label"]
ENTITY_COLUMNS = ["document_id", "entity_index", "text", "label", "start", "end"]

# Regex pattern for illegal control characters (except tab, newline, carriage return)
ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def sanitize_text(text: str) -> str:
    """Remove control characters that may interfere with CSV/Excel.

    Args:
        text: Input text

    Returns:
        Sanitized text
    """
    if not text:
        return text
    return ILLEGAL_CHARS.sub("", text)


class DocumentPipeline:
    """Pipeline that turns a file of texts into sentence, token and entity tables."""

    def __init__(self, config: PipelineConfig):
        """Initialize document pipeline.

        Args:
            config: Pipeline configuration
        """
        self.config = config
        self.model: Optional[Model] = Model.load(config.model) if config.model else None
        self.options = config.stages.to_options(self.model)

    def _detect_format(self, input_path: Path) -> str:
        if self.config.input_format != "auto":
            return self.config.input_format
        return "jsonl" if input_path.suffix.lower() in {".jsonl", ".json"} else "text"

    def read_records(self, input_path: Path) -> Iterator[tuple[str, str]]:
        """Read (document_id, text) pairs from the input file.

        JSONL records take their text from "text" or "content" and their id
        from "id" or "file_id"; plain text files hold one document per line.
        Blank lines and malformed JSON lines are skipped.

        Args:
            input_path: Path to the input file

        Yields:
            Document id and text
        """
        input_format = self._detect_format(input_path)
        with open(input_path, "r", encoding="utf-8") as infile:
            for line_num, line in enumerate(infile, 1):
                line = line.strip()
                if not line:
                    continue

                if input_format == "text":
                    yield f"line_{line_num}", line
                    continue

                try:
                    record = json.loads(line)
                except json.JSONDecodeError:
                    logger.warning(f"Skipping malformed JSON at line {line_num}")
                    continue
                if not isinstance(record, dict):
                    logger.warning(f"Skipping non-object JSON at line {line_num}")
                    continue

                text = record.get("text") or record.get("content") or ""
                doc_id = record.get("id") or record.get("file_id") or f"line_{line_num}"
                yield str(doc_id), text

    def process_text(self, text: str) -> Document:
        """Build a document from one text using the configured stages.

        Args:
            text: Input text

        Returns:
            The built document
        """
        return new_document(text, *self.options)

    @staticmethod
    def document_rows(doc_id: str, doc: Document) -> tuple[list[dict], list[dict], list[dict]]:
        """Flatten a document into sentence, token and entity rows."""
        sentences = [
            {"document_id": doc_id, "sentence_index": idx, **sentence.to_dict()}
            for idx, sentence in enumerate(doc.sentences())
        ]
        tokens = [
            {"document_id": doc_id, "token_index": idx, **token.to_dict()}
            for idx, token in enumerate(doc.tokens())
        ]
        entities = [
            {"document_id": doc_id, "entity_index": idx, **entity.to_dict()}
            for idx, entity in enumerate(doc.entities())
        ]
        return sentences, tokens, entities

    def _write_table(self, rows: list[dict], columns: list[str], name: str) -> Path:
        """Write rows to `<output_dir>/<name>.<format>`."""
        output = self.config.output
        output.output_dir.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame(rows, columns=columns)
        for col in df.select_dtypes(include=["object"]).columns:
            df[col] = df[col].apply(lambda x: sanitize_text(x) if isinstance(x, str) else x)

        if output.format == "csv":
            save_path = output.output_dir / f"{name}.csv"
            df.to_csv(save_path, index=False)
        elif output.format == "json":
            save_path = output.output_dir / f"{name}.jsonl"
            df.to_json(save_path, orient="records", lines=True, force_ascii=False)
        elif output.format == "parquet":
            save_path = output.output_dir / f"{name}.parquet"
            df.to_parquet(save_path, index=False)
        else:
            raise ValueError(f"Unsupported output format: {output.format}")

        logger.info(f"Wrote {len(df)} {name} rows to: {save_path}")
        return save_path

    def process_file(self, input_path: Path) -> int:
        """Process an input file and write the output tables.

        Args:
            input_path: Path to the input file

        Returns:
            Number of documents processed
        """
        logger.info(f"Reading from: {input_path}")

        sentence_rows: list[dict] = []
        token_rows: list[dict] = []
        entity_rows: list[dict] = []
        documents_processed = 0

        for doc_id, text in tqdm(self.read_records(input_path), desc="Building documents"):
            if self.config.max_documents and documents_processed >= self.config.max_documents:
                break
            doc = self.process_text(text)
            sentences, tokens, entities = self.document_rows(doc_id, doc)
            sentence_rows.extend(sentences)
            token_rows.extend(tokens)
            entity_rows.extend(entities)
            documents_processed += 1

        output = self.config.output
        if output.save_sentences:
            self._write_table(sentence_rows, SENTENCE_COLUMNS, "sentences")
        if output.save_tokens:
            self._write_table(token_rows, TOKEN_COLUMNS, "tokens")
        if output.save_entities:
            self._write_table(entity_rows, ENTITY_COLUMNS, "entities")

        return documents_processed

    def run(self) -> int:
        """Run the document pipeline.

        Returns:
            Number of documents processed
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file)
