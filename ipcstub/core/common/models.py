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

import dataclasses
from .config import DEFAULT_CAPABILITY, DEFAULT_OUTPUT_DIR, FAIL_FAST
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field


class GenerationConfig(BaseModel):
    """A named stub generation configuration.

    Required fields default to empty values so that a missing field is reported
    by the generator's own validation, together with the configuration name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='forbid')

    name: str = ''
    """A configuration unique identifier"""

    scheme: str = ''
    """The template set to use, e.g. 'php'"""

    packages: tuple[str, ...] = ()
    """Namespace prefixes to search commands in"""

    aliases: dict[str, str] | None = None
    """Alternate command names, passed to the templates verbatim"""

    target: Path | None = None
    """Where to store the generated files, defaults to <output>/<name>"""

    legal_text: str | None = Field(default=None, alias='legalText')
    """A copyright notice or something else to include in the stubs"""

    encoding: str | None = None
    """Encoding of the generated files"""


class StubSettings(BaseModel):
    """Structure of an ipcstub settings file."""

    model_config = ConfigDict(extra='forbid')

    generators: list[GenerationConfig] = Field(default_factory=list)
    classpath: list[Path] = Field(default_factory=list)
    output: Path = Path(DEFAULT_OUTPUT_DIR)
    capability: str = DEFAULT_CAPABILITY
    fail_fast: bool = FAIL_FAST
    template_dirs: list[Path] = Field(default_factory=list)


@dataclasses.dataclass(frozen=True)
class GenerationResult:
    """Outcome of one configuration of a generation run."""

    name: str
    target: Path
    files: tuple[Path, ...] = ()
