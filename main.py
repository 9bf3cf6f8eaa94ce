#!/usr/bin/env python
"""
Main entry point for the little search engine.
Uses Fire for CLI and Hydra for configuration management.
"""

import os
import sys
import json
import logging
from pathlib import Path
import fire
import hydra
from omegaconf import OmegaConf
from dotenv import load_dotenv

# Load .env variables and register resolver
load_dotenv()
OmegaConf.register_new_resolver("env", os.getenv, replace=True)

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from src.indices.search_engine import SearchEngine


class SearchCLI:
    """CLI for the little search engine."""

    def __init__(self, config_path: str = "conf", config_name: str = "config"):
        """
        Initialize CLI with configuration.

        Args:
            config_path: Path to config directory (relative to this file)
            config_name: Name of main config file
        """
        self.config_path = config_path
        self.config_name = config_name
        self.config = None
        self.engine = None
        self.logger = None

    def _init_config(self, overrides=None):
        """Initialize Hydra configuration."""
        with hydra.initialize(version_base=None, config_path=self.config_path):
            if overrides:
                self.config = hydra.compose(config_name=self.config_name, overrides=overrides)
            else:
                self.config = hydra.compose(config_name=self.config_name)

        # Setup logging
        logging.basicConfig(
            level=getattr(logging, self.config.logging.level),
            format=self.config.logging.format
        )
        self.logger = logging.getLogger(__name__)

    def _build_engine(self, data_dir: str = None, top_k: int = None,
                      show_progress: bool = None) -> SearchEngine:
        """Build the engine from the configured input files."""
        overrides = []
        if data_dir:
            overrides.append(f"paths.data_dir='{data_dir}'")
        if top_k is not None:
            overrides.append(f"query.top_k={top_k}")
        if show_progress is not None:
            overrides.append(f"indexing.show_progress={str(show_progress).lower()}")

        self._init_config(overrides)

        self.engine = SearchEngine(self.config)
        self.engine.make_index(self.config.paths.docs_file, self.config.paths.noise_words_file)
        return self.engine

    def index(self, data_dir: str = None, show_progress: bool = None):
        """
        Build the index and report statistics.

        Args:
            data_dir: Directory holding docs.txt, noisewords.txt and the documents
            show_progress: Show a progress bar while indexing
        """
        engine = self._build_engine(data_dir, show_progress=show_progress)
        stats = engine.get_statistics()

        self.logger.info("=" * 60)
        self.logger.info("INDEX STATISTICS")
        self.logger.info("=" * 60)
        for key, value in stats.items():
            self.logger.info(f"{key}: {value}")

        return stats

    def show(self, data_dir: str = None, as_json: bool = False):
        """
        Build the index and print every keyword with its occurrences.

        Args:
            data_dir: Directory holding the input files
            as_json: Print the index as JSON instead of one keyword per line
        """
        engine = self._build_engine(data_dir, show_progress=False)

        if as_json:
            print(json.dumps(engine.index.to_dict(), indent=2))
            return

        for keyword in sorted(engine.keywords_index):
            print(f"{keyword}: {engine.keywords_index[keyword]}")

    def search(self, kw1: str, kw2: str, data_dir: str = None, top_k: int = None):
        """
        Search for documents containing kw1 or kw2.

        Args:
            kw1: First keyword (wins frequency ties)
            kw2: Second keyword
            data_dir: Directory holding the input files
            top_k: Number of documents to return (default from config)
        """
        engine = self._build_engine(data_dir, top_k=top_k, show_progress=False)

        self.logger.info(f"Searching for: {kw1} OR {kw2}")
        results = engine.search(str(kw1).lower(), str(kw2).lower())

        if results is None:
            print("No matching documents")
            return None

        for i, doc_id in enumerate(results, 1):
            print(f"{i}. {doc_id}")

        return results

    def show_config(self, data_dir: str = None):
        """
        Display current configuration.

        Args:
            data_dir: Directory holding the input files
        """
        overrides = [f"paths.data_dir='{data_dir}'"] if data_dir else None
        self._init_config(overrides)

        self.logger.info("=" * 60)
        self.logger.info("CURRENT CONFIGURATION")
        self.logger.info("=" * 60)
        print(OmegaConf.to_yaml(self.config, resolve=True))


def main():
    """Main entry point."""
    fire.Fire(SearchCLI)


if __name__ == "__main__":
    main()
