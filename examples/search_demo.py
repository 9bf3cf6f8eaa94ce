#!/usr/bin/env python
"""
Demo script for the little search engine.

Indexes a few in-memory documents and runs OR queries against them.
Run with: python examples/search_demo.py
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.indices.search_engine import SearchEngine
from src.littlesearch import insert_last_occurrence, Occurrence


def demo_index():
    """Demo 1: Build an index from in-memory documents."""
    print("="*60)
    print("DEMO 1: Keyword Index")
    print("="*60)

    documents = {
        'doc1': "The bus stopped. The bus driver waved at the car!".split(),
        'doc2': "A car, a car, a car: the city is full of them.".split(),
        'doc3': "Take the bus or the train; either way, the bus wins.".split(),
    }

    engine = SearchEngine()
    engine.build(documents, ['a', 'the', 'of', 'is', 'or'], documents.get)

    for keyword in sorted(engine.keywords_index):
        print(f"  {keyword}: {engine.keywords_index[keyword]}")

    stats = engine.get_statistics()
    print(f"\nDocuments indexed: {stats['num_documents']}")
    print(f"Keywords: {stats['num_keywords']}")
    return engine


def demo_search(engine):
    """Demo 2: Two-keyword OR queries."""
    print("\n" + "="*60)
    print("DEMO 2: Top 5 Search")
    print("="*60)

    for kw1, kw2 in [('bus', 'car'), ('train', 'boat'), ('boat', 'plane')]:
        print(f"  {kw1} OR {kw2}: {engine.top5(kw1, kw2)}")


def demo_insertion():
    """Demo 3: Binary search insertion trace."""
    print("\n" + "="*60)
    print("DEMO 3: Occurrence Insertion")
    print("="*60)

    occs = [Occurrence(f"doc{i}", freq) for i, freq in enumerate([12, 8, 7, 5, 3, 2, 6])]
    print(f"  Before: {[str(o) for o in occs]}")
    midpoints = insert_last_occurrence(occs)
    print(f"  After:  {[str(o) for o in occs]}")
    print(f"  Midpoints probed: {midpoints}")


def main():
    engine = demo_index()
    demo_search(engine)
    demo_insertion()

    print("\n" + "="*60)
    print("All demos completed successfully!")
    print("="*60)


if __name__ == "__main__":
    main()
