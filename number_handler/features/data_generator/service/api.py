from pathlib import Path
from typing import Optional, Union

from number_handler.core.config.settings import settings
from ..domain.models import GenerationResult, GeneratorConfig
from .generator import RandomDataGenerator


def generate_data(root: Union[str, Path],
                  files_count: int = settings.FILES_COUNT,
                  config: Optional[GeneratorConfig] = None) -> GenerationResult:
    """
    Standalone API: fills `root` with `files_count` random data files.
    Falls back to the ranges from Settings when no config is given.
    """
    generator = RandomDataGenerator(config or GeneratorConfig.from_settings())
    return generator.generate_data(root, files_count)
