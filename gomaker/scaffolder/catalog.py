"""Fragment catalog for the generated Makefile.

The catalog is an ordered, read-only tuple of ``Fragment`` entries.  Each
fragment pairs a pure predicate over a ``ToggleSet`` with a block of Makefile
text.  Fragment bodies are Jinja2 snippets: inline ``{% if %}`` spans refer to
the same toggle names and are resolved by the composer once the fragment
itself has been selected.

Emission order is the tuple order::

    header, fmt, lint, vet, build-binary | build-library, test, bench,
    test-cover, test-cover-html, test-race, build-race, test-cpu, test-mem,
    help
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Toggle set
# ---------------------------------------------------------------------------


class ToggleSet(BaseModel):
    """Closed set of boolean feature switches, all off by default.

    Unknown toggle names are rejected when the model is constructed, so the
    composer only ever sees a fully populated, well-formed set.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    include_tests: bool = False
    include_benchmarks: bool = False
    include_linting: bool = False
    is_library: bool = False
    enable_shadow: bool = False
    enable_coverage: bool = False
    enable_coverage_html: bool = False
    enable_test_race: bool = False
    enable_race_checks: bool = False
    enable_cpu_profile: bool = False
    enable_mem_profile: bool = False

    @classmethod
    def names(cls) -> list[str]:
        """Return every recognised toggle name in declaration order."""
        return list(cls.model_fields)

    @classmethod
    def all_enabled(cls) -> "ToggleSet":
        """A set with every toggle switched on."""
        return cls(**{name: True for name in cls.names()})

    def as_context(self) -> dict[str, bool]:
        """Return a plain ``{toggle: value}`` mapping for template rendering."""
        return self.model_dump()


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

Predicate = Callable[[ToggleSet], bool]


def always() -> Predicate:
    """Predicate for mandatory fragments."""
    return lambda toggles: True


def when(*names: str) -> Predicate:
    """Predicate that holds when every named toggle is on."""
    _check_names(names)
    return lambda toggles: all(getattr(toggles, name) for name in names)


def unless(name: str) -> Predicate:
    """Predicate that holds when the named toggle is off."""
    _check_names((name,))
    return lambda toggles: not getattr(toggles, name)


def _check_names(names: tuple[str, ...]) -> None:
    known = set(ToggleSet.names())
    unknown = [name for name in names if name not in known]
    if unknown:
        raise ValueError(f"Unknown toggle(s): {', '.join(unknown)}")


# ---------------------------------------------------------------------------
# Fragments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Fragment:
    """A named block of Makefile text gated by a predicate."""

    name: str
    predicate: Predicate
    body: str

    def applies(self, toggles: ToggleSet) -> bool:
        return bool(self.predicate(toggles))


BIN_DIR = "bin"

_BENCH_FLAGS = "{% if include_benchmarks %}-bench=. -benchmem {% endif %}"

CATALOG: tuple[Fragment, ...] = (
    Fragment(
        name="header",
        predicate=always(),
        body=(
            ".DEFAULT_GOAL := help\n"
            "\n"
            f"BIN = $(CURDIR)/{BIN_DIR}\n"
            "VERSION ?= $(shell git describe --tags --always --dirty --match=v* 2> /dev/null || echo v0)\n"
            "\n"
            "$(BIN):\n"
            "\t@mkdir -p $@\n"
            "\n"
            ".PHONY:phony\n"
        ),
    ),
    Fragment(
        name="fmt",
        predicate=always(),
        body=(
            "fmt: phony ## format the codes\n"
            "\t@go fmt ./...\n"
        ),
    ),
    Fragment(
        name="lint",
        predicate=when("include_linting"),
        body=(
            "lint: phony fmt ## lint the codes\n"
            "\t@golint ./...\n"
        ),
    ),
    Fragment(
        name="vet",
        predicate=always(),
        body=(
            "vet: phony {% if include_linting %}lint{% else %}fmt{% endif %} ## vet the codes\n"
            "\t@go vet ./...\n"
            "{% if enable_shadow %}\n"
            "\t@shadow ./...\n"
            "{% endif %}\n"
        ),
    ),
    Fragment(
        name="build-binary",
        predicate=unless("is_library"),
        body=(
            "build: phony vet | $(BIN) ## build the binary\n"
            "\t@go build \\\n"
            "\t\t-tags release \\\n"
            "\t\t-ldflags '-X main.Version=$(VERSION)' \\\n"
            "\t\t-o $(BIN)/ ./...\n"
            "\n"
            "run: phony vet ## run the binary\n"
            "\t@go run main.go\n"
            "\n"
            "clean: phony\n"
            "\trm -rf $(BIN)\n"
        ),
    ),
    Fragment(
        name="build-library",
        predicate=when("is_library"),
        body=(
            "build: phony vet ## build the library\n"
            "\t@go build ./...\n"
            "\n"
            "clean: phony\n"
            "\trm -rf $(BIN)\n"
        ),
    ),
    Fragment(
        name="test",
        predicate=when("include_tests"),
        body=(
            "test: phony vet ## test the codes\n"
            "\t@go test -v ./...\n"
        ),
    ),
    Fragment(
        name="bench",
        predicate=when("include_benchmarks"),
        body=(
            "bench: phony vet ## test with benchmarks\n"
            "\t@go test -v -bench=. -benchmem ./...\n"
        ),
    ),
    Fragment(
        name="test-cover",
        predicate=when("include_tests", "enable_coverage"),
        body=(
            "test-cover: phony vet ## test with coverage\n"
            "\t@go test -v -cover ./...\n"
        ),
    ),
    Fragment(
        name="test-cover-html",
        predicate=when("include_tests", "enable_coverage_html"),
        body=(
            "test-cover-html: phony vet ## test with coverage in an HTML view\n"
            "\t@go test -v -cover -coverprofile=c.out ./...\n"
            "\t@go tool cover -html=c.out\n"
        ),
    ),
    Fragment(
        name="test-race",
        predicate=when("enable_test_race"),
        body=(
            "test-race: phony vet ## test and check for race conditions\n"
            "\t@go test -race ./...\n"
        ),
    ),
    Fragment(
        name="build-race",
        predicate=when("enable_race_checks"),
        body=(
            "build-race: phony vet ## build and check for race conditions\n"
            "\t@go build -race\n"
        ),
    ),
    Fragment(
        name="test-cpu",
        predicate=when("enable_cpu_profile"),
        body=(
            "test-cpu: phony vet ## test and profile CPU\n"
            f"\t@go test {_BENCH_FLAGS}-cpuprofile cpu.out ./...\n"
            "\t@go tool pprof cpu.out\n"
        ),
    ),
    Fragment(
        name="test-mem",
        predicate=when("enable_mem_profile"),
        body=(
            "test-mem: phony vet ## test and profile memory\n"
            f"\t@go test {_BENCH_FLAGS}-memprofile mem.out ./...\n"
            "\t@go tool pprof mem.out\n"
        ),
    ),
    Fragment(
        name="help",
        predicate=always(),
        body=(
            "GREEN  := $(shell tput -Txterm setaf 2)\n"
            "RESET  := $(shell tput -Txterm sgr0)\n"
            "\n"
            "help: phony ## print this help message\n"
            "\t@awk -F ':|##' '/^[^\\t].+?:.*?##/ "
            "{ printf \"${GREEN}%-20s${RESET}%s\\n\", $$1, $$NF }' $(MAKEFILE_LIST)\n"
        ),
    ),
)


def fragment_names(catalog: tuple[Fragment, ...] = CATALOG) -> list[str]:
    """Return fragment names in emission order."""
    return [fragment.name for fragment in catalog]
