"""gomaker scaffolder -- composes a Makefile and writes a starter Go project.

Quick usage::

    from gomaker.scaffolder import ProjectConfig, ProjectGenerator, ToggleSet

    config = ProjectConfig(
        directory="my-service",
        toggles=ToggleSet(include_tests=True, enable_coverage_html=True),
        module_path="github.com/user/my-service",
    )
    written = await ProjectGenerator(config).generate()

The composer can also be used on its own::

    from gomaker.scaffolder import ToggleSet, compose

    print(compose(ToggleSet(is_library=True)).text)
"""

from gomaker.scaffolder.catalog import CATALOG, Fragment, ToggleSet
from gomaker.scaffolder.composer import ComposedRecipe, collapse_blank_lines, compose
from gomaker.scaffolder.generator import ProjectConfig, ProjectGenerator, ScaffoldError
from gomaker.scaffolder.templates import TemplateRenderer

__all__ = [
    "CATALOG",
    "ComposedRecipe",
    "Fragment",
    "ProjectConfig",
    "ProjectGenerator",
    "ScaffoldError",
    "TemplateRenderer",
    "ToggleSet",
    "collapse_blank_lines",
    "compose",
]
