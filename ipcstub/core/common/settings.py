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

import yaml
from .errors import ConfigurationError
from .models import StubSettings
from pathlib import Path
from pydantic import ValidationError


def parse_settings(yaml_content: str, base_dir: Path | None = None) -> StubSettings:
    """Parse an ipcstub settings document.

    Relative paths are taken relative to base_dir when it is given.

    :raises ConfigurationError: If the document is not valid YAML or not a valid settings file.
    """
    try:
        data = yaml.safe_load(yaml_content) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f'cannot parse settings: {e}') from e
    if not isinstance(data, dict):
        raise ConfigurationError('settings must be a mapping')

    try:
        settings = StubSettings(**data)
    except ValidationError as e:
        raise ConfigurationError(f'invalid settings: {e}') from e

    if base_dir is None:
        return settings
    return settings.model_copy(
        update={
            'classpath': [base_dir / path for path in settings.classpath],
            'output': base_dir / settings.output,
            'template_dirs': [base_dir / path for path in settings.template_dirs],
            'generators': [
                generator.model_copy(update={'target': base_dir / generator.target})
                if generator.target is not None
                else generator
                for generator in settings.generators
            ],
        }
    )


def load_settings(file_path: Path) -> StubSettings:
    """Load an ipcstub settings file."""
    if not file_path.exists():
        raise ConfigurationError(f'settings file not found: {file_path}')

    with open(file_path, 'r', encoding='utf-8') as f:
        yaml_content = f.read()

    return parse_settings(yaml_content, file_path.parent)
