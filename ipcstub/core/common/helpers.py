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

import time
from collections.abc import Iterable
from contextlib import contextmanager
from datetime import datetime
from loguru import logger


NAMESPACE_DELIMITER = '.'


@contextmanager
def generation_timer(name: str, scheme: str):
    """Context manager for timing the generation of one configuration.

    :param name: The configuration name.
    :param scheme: The scheme being rendered.
    """
    start = time.perf_counter()
    logger.info('Starting generation of {} ({})', name, scheme)
    yield
    end = time.perf_counter()
    elapsed_time = end - start
    logger.info('Generation of {} ({}) finished in {:.3f} seconds', name, scheme, elapsed_time)


def in_packages(name: str, packages: Iterable[str]) -> bool:
    """Check whether a dotted name lies strictly below one of the given packages."""
    return any(name.startswith(package + NAMESPACE_DELIMITER) for package in packages)


def may_contain(module: str, packages: Iterable[str]) -> bool:
    """Check whether a module can define types that lie below one of the given packages."""
    return any(
        module == package or module.startswith(package + NAMESPACE_DELIMITER)
        for package in packages
    )


def format_generation_date(moment: datetime) -> str:
    """Format a timestamp the way generated file headers show it."""
    return f'{moment:%a}, {moment.day} {moment:%b %Y %H:%M:%S %z}'
