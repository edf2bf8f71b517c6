"""
Output path mapping for generated code.

The generator asks a path mapper where the code for a package (and the
samples for each of its methods) should be written. The answer is a relative,
'/'-joined path; placing files on disk is left to the caller.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import logging
import re

from ..formatters.name_formatter import NameFormatter, get_name_formatter
from ..models.config import PathMapperConfig, ProductConfig
from ..models.naming import Name

logger = logging.getLogger(__name__)

# Ruby uses "::" between namespaces, so splitting can produce empty pieces.
PACKAGE_SPLIT_PATTERN = re.compile(r"[.:\\]")


class CodePathMapper(ABC):
    """Interface consumed by the generator to place generated artifacts."""

    SAMPLES_DIRECTORY = "samples"

    @abstractmethod
    def path_for_element(self, package_name: Optional[str]) -> str:
        pass

    @abstractmethod
    def path_for_sample(self, package_name: Optional[str], method_name: Optional[str]) -> str:
        pass

    def get_output_path(self, element_full_name: str, product_config: ProductConfig) -> str:
        """Output path for an element; only the product's package name is used."""
        return self.path_for_element(product_config.package_name)

    def get_samples_output_path(
        self,
        element_full_name: str,
        product_config: ProductConfig,
        method_name: Optional[str]
    ) -> str:
        """Output path for the sample of one method of an element."""
        return self.path_for_sample(product_config.package_name, method_name)


class CommonCodePathMapper(CodePathMapper):
    """
    Builds the output path from an optional prefix and the package name.

    Layout: [prefix]/[samples]/[package segments...]/[sample name]
    where each part is only present when configured or requested.
    """

    def __init__(
        self,
        prefix: str = "",
        append_package: bool = False,
        name_formatter: Optional[NameFormatter] = None
    ):
        self._prefix = prefix or ""
        self._append_package = append_package
        self._name_formatter = name_formatter

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def append_package(self) -> bool:
        return self._append_package

    @property
    def name_formatter(self) -> Optional[NameFormatter]:
        return self._name_formatter

    @classmethod
    def from_config(cls, config: PathMapperConfig) -> "CommonCodePathMapper":
        name_formatter = get_name_formatter(config.formatter) if config.formatter else None
        return cls(
            prefix=config.prefix,
            append_package=config.append_package,
            name_formatter=name_formatter
        )

    @staticmethod
    def new_builder() -> "CommonCodePathMapperBuilder":
        return CommonCodePathMapperBuilder()

    def path_for_element(self, package_name: Optional[str]) -> str:
        return self.compute_path(package_name)

    def path_for_sample(self, package_name: Optional[str], method_name: Optional[str]) -> str:
        return self.compute_path(package_name, method_name)

    def compute_path(self, package_name: Optional[str], sample_name: Optional[str] = None) -> str:
        dirs: List[str] = []
        have_sample = bool(sample_name)

        if self._prefix:
            dirs.append(self._prefix)

        if have_sample:
            dirs.append(self.SAMPLES_DIRECTORY)

        if self._append_package and package_name:
            for segment in PACKAGE_SPLIT_PATTERN.split(package_name):
                if segment:
                    dirs.append(self._format(segment))

        if have_sample:
            dirs.append(self._format(sample_name))

        path = "/".join(dirs)
        logger.debug(f"Mapped package '{package_name}' (sample: {sample_name}) to '{path}'")
        return path

    def _format(self, segment: str) -> str:
        """Formats one segment of a file path."""
        if self._name_formatter is None:
            return segment.lower()
        return self._name_formatter.package_file_path_piece(Name.upper_camel(segment))

    def __repr__(self) -> str:
        formatter = type(self._name_formatter).__name__ if self._name_formatter else None
        return (
            f"{type(self).__name__}(prefix={self._prefix!r}, "
            f"append_package={self._append_package}, name_formatter={formatter})"
        )


class CommonCodePathMapperBuilder:
    """Fluent construction of a CommonCodePathMapper."""

    def __init__(self):
        self._prefix = ""
        self._should_append_package = False
        self._name_formatter: Optional[NameFormatter] = None

    def set_prefix(self, prefix: str) -> "CommonCodePathMapperBuilder":
        self._prefix = prefix
        return self

    def set_should_append_package(self, should_append_package: bool) -> "CommonCodePathMapperBuilder":
        self._should_append_package = should_append_package
        return self

    def set_package_file_path_name_formatter(
        self, name_formatter: Optional[NameFormatter]
    ) -> "CommonCodePathMapperBuilder":
        self._name_formatter = name_formatter
        return self

    def build(self) -> CommonCodePathMapper:
        return CommonCodePathMapper(
            prefix=self._prefix,
            append_package=self._should_append_package,
            name_formatter=self._name_formatter
        )
