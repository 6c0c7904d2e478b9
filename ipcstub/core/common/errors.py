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


class IpcStubError(Exception):
    """Base class for all errors raised while generating stubs."""

    config: str | None = None
    """Name of the configuration being generated when the error occurred"""

    def __str__(self):
        """Return the message, naming the configuration when it is known."""
        message = super().__str__()
        if self.config is None:
            return message
        return f"configuration '{self.config}': {message}"


class ConfigurationError(IpcStubError):
    """A generator configuration is incomplete or inconsistent."""


class ClasspathError(IpcStubError):
    """The classpath could not be scanned or a module on it could not be loaded."""


class NamespaceError(IpcStubError):
    """A discovered command cannot be placed into the namespace tree."""


class TemplateError(IpcStubError):
    """Base class for template resolution and rendering failures."""

    def __init__(self, message: str, scheme: str, template: str):
        """Initialize the error with the scheme and template involved."""
        super().__init__(f"{message} (scheme '{scheme}', template '{template}')")
        self.scheme = scheme
        self.template = template


class TemplateResolutionError(TemplateError):
    """A template could not be found for the requested scheme."""


class TemplateRenderingError(TemplateError):
    """A template was found but failed to render."""


class OutputError(IpcStubError):
    """An output directory or file could not be created."""

    def __init__(self, message: str, scheme: str | None = None):
        """Initialize the error with the scheme being generated, if known."""
        super().__init__(message if scheme is None else f"{message} (scheme '{scheme}')")
        self.scheme = scheme


class GenerationError(IpcStubError):
    """One or more configurations failed while the run kept going."""

    def __init__(self, failures: dict[str, Exception]):
        """Initialize the error with the failure of each configuration."""
        details = '; '.join(
            str(error) if getattr(error, 'config', None) == name else f'{name}: {error}'
            for name, error in failures.items()
        )
        super().__init__(f'{len(failures)} configuration(s) failed: {details}')
        self.failures = failures
