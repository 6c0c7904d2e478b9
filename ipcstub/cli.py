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

"""Command line entry point of the stub generator."""

import argparse
import sys
from .core.common.config import IPCSTUB_LOG_LEVEL
from .core.common.errors import ConfigurationError, IpcStubError
from .core.common.models import StubSettings
from .core.common.settings import load_settings
from .core.generator.engine import TemplateEngine
from .core.generator.orchestrator import StubGenerator, filter_commands
from .core.tree.builder import build_namespace_tree
from .core.tree.namespace import NamespaceNode
from loguru import logger
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser of the ipcstub command."""
    parser = argparse.ArgumentParser(
        prog='ipcstub', description='Generate client stubs for IpcCommand libraries.'
    )
    parser.add_argument('--log-level', default=IPCSTUB_LOG_LEVEL, help='loguru log level')
    commands = parser.add_subparsers(dest='command', required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        '-c', '--config', type=Path, required=True, help='settings file (YAML)'
    )
    common.add_argument(
        '--classpath',
        type=Path,
        action='append',
        default=[],
        help='source directory or archive to search commands in, repeatable',
    )
    common.add_argument('--capability', help='dotted path of the command base class')

    generate = commands.add_parser('generate', parents=[common], help='generate stubs')
    generate.add_argument('-o', '--output', type=Path, help='output root directory')
    generate.add_argument(
        '--template-dir',
        type=Path,
        action='append',
        default=[],
        help='directory with scheme templates overriding the bundled ones, repeatable',
    )
    generate.add_argument(
        '--keep-going',
        action='store_true',
        help='continue with the remaining configurations when one fails',
    )

    inspect_parser = commands.add_parser(
        'inspect', parents=[common], help='print the commands found for each configuration'
    )
    inspect_parser.add_argument('--name', help='only show the configuration with this name')
    return parser


def run_generate(args: argparse.Namespace, settings: StubSettings) -> int:
    """Run the generate command."""
    generator = StubGenerator(
        configs=settings.generators,
        classpath=settings.classpath + args.classpath,
        output_root=args.output or settings.output,
        engine=TemplateEngine(args.template_dir + settings.template_dirs),
        fail_fast=settings.fail_fast and not args.keep_going,
        capability=args.capability or settings.capability,
    )
    for result in generator.run():
        logger.info('{}: {} file(s) in {}', result.name, len(result.files), result.target)
    return 0


def run_inspect(args: argparse.Namespace, settings: StubSettings) -> int:
    """Run the inspect command."""
    configs = [c for c in settings.generators if args.name is None or c.name == args.name]
    if not configs:
        raise ConfigurationError(f"no configuration named '{args.name}'")
    generator = StubGenerator(
        configs=configs,
        classpath=settings.classpath + args.classpath,
        capability=args.capability or settings.capability,
    )
    descriptors = generator.discover()
    for config in configs:
        print(f'{config.name} ({config.scheme})')
        tree = build_namespace_tree(filter_commands(descriptors, config.packages))
        for root in tree.roots:
            _print_node(root, indent=1)
    return 0


def _print_node(node: NamespaceNode, indent: int):
    pad = '  ' * indent
    print(f'{pad}{node.name}/')
    for command in node.commands:
        meta = command.meta
        flags = ' [deprecated]' if meta.deprecated else ''
        description = f' - {meta.description}' if meta.description else ''
        print(f'{pad}  {command.name}{flags}{description}')
    for child in node.packages:
        _print_node(child, indent + 1)


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ipcstub command."""
    args = build_parser().parse_args(argv)

    # Configure Loguru logging
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    try:
        settings = load_settings(args.config)
        if args.command == 'generate':
            return run_generate(args, settings)
        return run_inspect(args, settings)
    except IpcStubError as e:
        logger.error('{}', e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
