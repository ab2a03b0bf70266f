"""Simulate the inheritance of blood-type alleles through a family tree."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Optional

GENERATIONS = 3
INDENT_LENGTH = 4
_ALLELES = ("A", "B", "O")


@dataclass
class Person:
    """A person with two alleles and, unless a founder, two parents."""

    alleles: tuple[str, str]
    parents: Optional[tuple["Person", "Person"]] = None


def random_allele(rng: Optional[random.Random] = None) -> str:
    """Pick one of the alleles A, B and O with equal chance."""
    source = rng if rng is not None else random
    return _ALLELES[source.randrange(len(_ALLELES))]


def create_family(generations: int, rng: Optional[random.Random] = None) -> Person:
    """Create a person with ``generations`` levels of ancestry, themself included.

    Each child inherits one allele at random from each parent; the oldest
    generation gets random alleles.
    """
    source = rng if rng is not None else random.Random()
    if generations > 1:
        mother = create_family(generations - 1, source)
        father = create_family(generations - 1, source)
        alleles = (
            mother.alleles[source.randrange(2)],
            father.alleles[source.randrange(2)],
        )
        return Person(alleles, (mother, father))
    return Person((random_allele(source), random_allele(source)))


def format_family(person: Optional[Person], generation: int = 0) -> str:
    """Render ``person`` and their ancestors, one indented line each."""
    if person is None:
        return ""
    lines = [
        " " * (generation * INDENT_LENGTH)
        + f"Generation {generation}, blood type {person.alleles[0]}{person.alleles[1]}\n"
    ]
    for parent in person.parents or ():
        lines.append(format_family(parent, generation + 1))
    return "".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    """Print a randomly generated family tree of blood types."""
    parser = argparse.ArgumentParser(description="Simulate blood-type inheritance.")
    parser.add_argument("--generations", type=int, default=GENERATIONS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    family = create_family(args.generations, random.Random(args.seed))
    sys.stdout.write(format_family(family))
    return 0


if __name__ == "__main__":
    sys.exit(main())