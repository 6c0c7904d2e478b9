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

"""Jinja2 adapter resolving templates by scheme and name."""

import jinja2
from ..common.config import ENTRY_TEMPLATE, TEMPLATE_SUFFIX
from ..common.errors import (
    IpcStubError,
    TemplateRenderingError,
    TemplateResolutionError,
)
from collections.abc import Mapping, Sequence
from loguru import logger
from pathlib import Path
from typing import Any


class TemplateEngine:
    """Renders scheme templates.

    User template directories are searched first, so a scheme bundled with
    ipcstub can be overridden one template at a time.
    """

    def __init__(self, template_dirs: Sequence[Path | str] = (), log=logger):
        """Initialize the Jinja2 environment."""
        loaders: list[jinja2.BaseLoader] = [
            jinja2.FileSystemLoader([str(directory) for directory in template_dirs])
        ]
        loaders.append(jinja2.PackageLoader('ipcstub', 'templates'))
        self.environment = jinja2.Environment(
            loader=jinja2.ChoiceLoader(loaders),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
        )
        self.log = log

    @staticmethod
    def template_path(scheme: str, template: str) -> str:
        """Return the loader path of a template of a scheme."""
        return f'{scheme}/{template}{TEMPLATE_SUFFIX}'

    def get_template(self, scheme: str, template: str) -> jinja2.Template:
        """Resolve a template.

        :raises TemplateResolutionError: If the template does not exist or does not compile.
        """
        path = self.template_path(scheme, template)
        try:
            return self.environment.get_template(path)
        except jinja2.TemplateNotFound as e:
            raise TemplateResolutionError('cannot find template', scheme, template) from e
        except jinja2.TemplateSyntaxError as e:
            raise TemplateResolutionError(
                f'invalid template syntax at line {e.lineno}: {e.message}', scheme, template
            ) from e

    def render(self, scheme: str, template: str, context: Mapping[str, Any], log=None) -> str:
        """Resolve and render a template against the given context.

        Errors raised by generator callbacks from within the template propagate unchanged.

        :param log: Logger of the calling configuration, the engine's own if omitted.
        :raises TemplateResolutionError: If the template cannot be resolved.
        :raises TemplateRenderingError: If rendering fails.
        """
        tpl = self.get_template(scheme, template)
        (log or self.log).debug('Rendering {}', self.template_path(scheme, template))
        try:
            return tpl.render(context)
        except IpcStubError:
            raise
        except jinja2.TemplateError as e:
            raise TemplateRenderingError(f'cannot merge template: {e}', scheme, template) from e
        except Exception as e:
            raise TemplateRenderingError(
                f'cannot merge template: {type(e).__name__}: {e}', scheme, template
            ) from e

    def has_scheme(self, scheme: str) -> bool:
        """Check whether the scheme provides an entry template."""
        try:
            self.get_template(scheme, ENTRY_TEMPLATE)
        except TemplateResolutionError:
            return False
        return True
