# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from ..common.command import CommandDescriptor
from ..common.config import DEFAULT_ENCODING
from ..common.errors import OutputError
from ..common.helpers import format_generation_date
from ..common.models import GenerationConfig
from ..tree.namespace import NamespaceNode, NamespaceTree
from .engine import TemplateEngine
from datetime import datetime
from loguru import logger
from pathlib import Path
from typing import Any


class GeneratorContext:
    """The 'generator' object templates of one configuration render against."""

    def __init__(
        self,
        config: GenerationConfig,
        tree: NamespaceTree,
        target_directory: Path,
        engine: TemplateEngine,
        generated_at: datetime,
        log=logger,
    ):
        """Initialize the context of one configuration."""
        self.config = config
        self.tree = tree
        self.target_directory = target_directory
        self.engine = engine
        self.generated_at = generated_at
        self.log = log
        self.generated_files: list[Path] = []

    @property
    def name(self) -> str:
        """Return the configuration name."""
        return self.config.name

    @property
    def scheme(self) -> str:
        """Return the scheme being rendered."""
        return self.config.scheme

    @property
    def packages(self) -> tuple[str, ...]:
        """Return the configured namespace prefixes."""
        return self.config.packages

    @property
    def aliases(self) -> dict[str, str] | None:
        """Return the configured aliases, unchanged."""
        return self.config.aliases

    @property
    def target(self) -> Path:
        """Return the directory files are generated into."""
        return self.target_directory

    @property
    def legal_text(self) -> str | None:
        """Return the configured legal text."""
        return self.config.legal_text

    @property
    def encoding(self) -> str:
        """Return the encoding of generated files."""
        return self.config.encoding or DEFAULT_ENCODING

    @property
    def root_packages(self) -> tuple[NamespaceNode, ...]:
        """Return the root forest of the namespace tree."""
        return self.tree.roots

    @property
    def commands(self) -> tuple[CommandDescriptor, ...]:
        """Return all commands of the tree, namespace by namespace."""
        return tuple(command for node in self.tree.nodes() for command in node.commands)

    @property
    def generation_date(self) -> str:
        """Return the common generation date of this run."""
        return format_generation_date(self.generated_at)

    def template_context(self, args: Any = None) -> dict[str, Any]:
        """Return the variables templates are rendered with."""
        return {
            'generator': self,
            'config': self.config,
            'packages': self.root_packages,
            'aliases': self.aliases,
            'args': args,
        }

    def render(self, template: str, args: Any = None) -> str:
        """Render a template of this configuration's scheme."""
        return self.engine.render(self.scheme, template, self.template_context(args), log=self.log)

    def generate_file(self, relative_path: str, template: str, args: Any = None) -> str:
        """Render a template into a file below the target directory.

        Returns an empty string so templates can call it from an expression.

        :raises OutputError: If the path escapes the target directory or cannot be written.
        """
        target = self.target_directory.resolve()
        generated_file = (target / relative_path).resolve()
        if not generated_file.is_relative_to(target) or generated_file == target:
            raise OutputError(
                f'refusing to generate {relative_path} outside of {target}', self.scheme
            )

        content = self.render(template, args)

        self.log.info('Generating {}...', generated_file)
        try:
            generated_file.parent.mkdir(parents=True, exist_ok=True)
            with open(generated_file, 'w', encoding=self.encoding, newline='') as f:
                f.write(content)
        except (OSError, LookupError, UnicodeError) as e:
            raise OutputError(f'cannot create file {generated_file}: {e}', self.scheme) from e
        self.generated_files.append(generated_file)
        return ''

    def include_file(self, template: str, args: Any = None) -> str:
        """Render a template and return its text for inclusion in another template."""
        return self.render(template, args)
