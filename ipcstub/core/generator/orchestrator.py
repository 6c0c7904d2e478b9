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

"""Binds generation configurations to discovery, tree building and rendering."""

import codecs
from ...ipc import IpcCommand
from ..common.command import CommandDescriptor
from ..common.config import DEFAULT_OUTPUT_DIR, ENTRY_TEMPLATE, FAIL_FAST, get_generation_time
from ..common.errors import (
    ConfigurationError,
    GenerationError,
    IpcStubError,
    OutputError,
    TemplateError,
)
from ..common.helpers import generation_timer, in_packages
from ..common.models import GenerationConfig, GenerationResult
from ..discovery.classifier import discover_commands
from ..tree.builder import build_namespace_tree
from .context import GeneratorContext
from .engine import TemplateEngine
from collections.abc import Sequence
from loguru import logger
from pathlib import Path


def validate_configs(configs: Sequence[GenerationConfig]) -> None:
    """Check all configurations before anything is discovered or written.

    :raises ConfigurationError: On the first incomplete or inconsistent configuration.
    """
    if not configs:
        raise ConfigurationError('no generators configured')
    seen = set()
    for config in configs:
        if not config.name:
            raise ConfigurationError('no name configured for configuration')
        if config.name in seen:
            raise ConfigurationError(f"configuration name '{config.name}' is used more than once")
        seen.add(config.name)
        if not config.scheme:
            raise ConfigurationError(f"no scheme configured for configuration '{config.name}'")
        if not config.packages or not all(config.packages):
            raise ConfigurationError(f"no packages configured for configuration '{config.name}'")
        if config.encoding:
            try:
                codecs.lookup(config.encoding)
            except LookupError as e:
                raise ConfigurationError(
                    f"unknown encoding '{config.encoding}' for configuration '{config.name}'"
                ) from e


def filter_commands(
    descriptors: Sequence[CommandDescriptor], packages: Sequence[str]
) -> list[CommandDescriptor]:
    """Return the commands below one of the given packages, keeping their order."""
    return [descriptor for descriptor in descriptors if in_packages(descriptor.full_name, packages)]


class StubGenerator:
    """Generates stubs for a list of configurations sharing one classpath."""

    def __init__(
        self,
        configs: Sequence[GenerationConfig],
        classpath: Sequence[Path | str],
        output_root: Path | str = DEFAULT_OUTPUT_DIR,
        engine: TemplateEngine | None = None,
        fail_fast: bool = FAIL_FAST,
        capability: type | str = IpcCommand,
    ):
        """Initialize the generator.

        :param configs: The configurations to generate, in order.
        :param classpath: Source directories and archives to search commands in.
        :param output_root: Directory receiving one sub directory per configuration
            without an explicit target.
        :param engine: The template engine, bundled templates only if omitted.
        :param fail_fast: Abort the run on the first failing configuration; otherwise
            the remaining configurations run and a GenerationError is raised at the end.
        :param capability: The class all commands implement, or its dotted path.
        """
        self.configs = list(configs)
        self.classpath = list(classpath)
        self.output_root = Path(output_root)
        self.engine = engine or TemplateEngine()
        self.fail_fast = fail_fast
        self.capability = capability

    def discover(self) -> tuple[CommandDescriptor, ...]:
        """Validate the configurations and find the commands of all of them in one pass."""
        validate_configs(self.configs)

        all_packages = list(dict.fromkeys(p for config in self.configs for p in config.packages))
        logger.info('Searching for IpcCommands in:')
        for package in all_packages:
            logger.info('    {}', package)
        for config in self.configs:
            if config.aliases:
                logger.info("Aliases of '{}' to generate built-in:", config.name)
                for alias, command in config.aliases.items():
                    logger.info('    {} -> {}', alias, command)
            else:
                logger.info("No aliases configured for '{}'", config.name)

        descriptors = discover_commands(self.classpath, all_packages, self.capability)
        logger.info('Found {} IpcCommands; generating stubs...', len(descriptors))
        return descriptors

    def run(self) -> list[GenerationResult]:
        """Generate the stubs of every configuration.

        :raises ConfigurationError: If any configuration is invalid; nothing is written then.
        :raises GenerationError: If configurations failed while not failing fast.
        """
        descriptors = self.discover()
        generated_at = get_generation_time()

        results = []
        failures: dict[str, Exception] = {}
        for config in self.configs:
            try:
                results.append(self.generate(config, descriptors, generated_at))
            except IpcStubError as e:
                e.config = config.name
                if self.fail_fast or not isinstance(e, (TemplateError, OutputError)):
                    raise
                logger.error('Generation failed: {}', e)
                failures[config.name] = e

        if failures:
            raise GenerationError(failures)
        return results

    def target_directory(self, config: GenerationConfig) -> Path:
        """Return where the files of a configuration are generated."""
        if config.target is not None:
            return Path(config.target)
        return self.output_root / config.name

    def generate(self, config, descriptors, generated_at) -> GenerationResult:
        """Render one configuration against its share of the discovered commands."""
        log = logger.bind(config=config.name, scheme=config.scheme)
        tree = build_namespace_tree(filter_commands(descriptors, config.packages))
        target = self.target_directory(config)

        with generation_timer(config.name, config.scheme):
            # resolve the entry template before touching the file system
            self.engine.get_template(config.scheme, ENTRY_TEMPLATE)

            try:
                target.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise OutputError(
                    f'cannot create stub directory {target}: {e}', config.scheme
                ) from e

            context = GeneratorContext(config, tree, target, self.engine, generated_at, log=log)
            context.render(ENTRY_TEMPLATE)

        return GenerationResult(
            name=config.name, target=target, files=tuple(context.generated_files)
        )
