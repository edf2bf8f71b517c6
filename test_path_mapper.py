"""
Tests for the common code path mapper.
"""
import pytest

from pathmapper.formatters.name_formatter import (
    CSharpNameFormatter,
    JavaNameFormatter,
    NameFormatter,
    RubyNameFormatter,
)
from pathmapper.mappers.code_path_mapper import CodePathMapper, CommonCodePathMapper
from pathmapper.models.config import PathMapperConfig, ProductConfig


@pytest.mark.parametrize("package_name", ["", "a.b.c", "Foo::Bar", None])
def test_no_prefix_no_package_is_empty(package_name):
    mapper = CommonCodePathMapper()
    assert mapper.path_for_element(package_name) == ""


def test_prefix_only():
    mapper = CommonCodePathMapper(prefix="generated")
    assert mapper.path_for_element("a.b.c") == "generated"


def test_package_segments_lowercased():
    mapper = CommonCodePathMapper(append_package=True)
    assert mapper.path_for_element("com.example.foo") == "com/example/foo"
    assert mapper.path_for_element("Com.Example.Foo") == "com/example/foo"


def test_empty_segments_are_dropped():
    mapper = CommonCodePathMapper(append_package=True)
    assert mapper.path_for_element("Foo::Bar") == "foo/bar"
    assert mapper.path_for_element(".a..b.") == "a/b"
    assert mapper.path_for_element("Foo\\Bar:Baz") == "foo/bar/baz"
    assert mapper.path_for_element("::") == ""


def test_sample_path():
    mapper = CommonCodePathMapper(prefix="gen", append_package=True)
    assert mapper.path_for_sample("pkg.sub", "listFoos") == "gen/samples/pkg/sub/listfoos"


def test_sample_path_without_package():
    mapper = CommonCodePathMapper(prefix="gen")
    assert mapper.path_for_sample("pkg.sub", "listFoos") == "gen/samples/listfoos"


def test_empty_sample_name_is_element_path():
    mapper = CommonCodePathMapper(prefix="gen", append_package=True)
    assert mapper.path_for_sample("pkg.sub", "") == "gen/pkg/sub"
    assert mapper.path_for_sample("pkg.sub", None) == "gen/pkg/sub"


def test_repeated_calls_are_identical():
    mapper = CommonCodePathMapper(prefix="gen", append_package=True, name_formatter=RubyNameFormatter())
    first = mapper.path_for_sample("Google::Cloud::SpeechV1", "longRunningRecognize")
    assert first == mapper.path_for_sample("Google::Cloud::SpeechV1", "longRunningRecognize")


def test_ruby_formatter():
    mapper = CommonCodePathMapper(append_package=True, name_formatter=RubyNameFormatter())
    assert mapper.path_for_element("Google::Cloud::SpeechV1") == "google/cloud/speech_v1"
    assert mapper.path_for_sample("Google::Cloud", "listFoos") == "samples/google/cloud/list_foos"


def test_csharp_formatter():
    mapper = CommonCodePathMapper(append_package=True, name_formatter=CSharpNameFormatter())
    assert mapper.path_for_element("google.cloud.speech") == "Google/Cloud/Speech"


def test_prefix_is_not_formatted():
    mapper = CommonCodePathMapper(prefix="Src", append_package=True, name_formatter=CSharpNameFormatter())
    assert mapper.path_for_element("foo") == "Src/Foo"


def test_formatter_receives_upper_camel_name():
    received = []

    class RecordingFormatter(NameFormatter):
        def package_file_path_piece(self, name):
            received.append(name.pieces)
            return "x"

    mapper = CommonCodePathMapper(append_package=True, name_formatter=RecordingFormatter())
    assert mapper.path_for_sample("fooBar", "getHTTPThing") == "samples/x/x"
    assert received == [("foo", "Bar"), ("get", "HTTP", "Thing")]


def test_builder():
    mapper = (
        CommonCodePathMapper.new_builder()
        .set_prefix("lib")
        .set_should_append_package(True)
        .set_package_file_path_name_formatter(RubyNameFormatter())
        .build()
    )
    assert mapper.prefix == "lib"
    assert mapper.append_package is True
    assert isinstance(mapper.name_formatter, RubyNameFormatter)
    assert mapper.path_for_element("Google::Cloud") == "lib/google/cloud"


def test_builder_defaults():
    mapper = CommonCodePathMapper.new_builder().build()
    assert mapper.prefix == ""
    assert mapper.append_package is False
    assert mapper.name_formatter is None


def test_from_config():
    mapper = CommonCodePathMapper.from_config(
        PathMapperConfig(prefix="src", append_package=True, formatter="csharp")
    )
    assert isinstance(mapper.name_formatter, CSharpNameFormatter)
    assert mapper.path_for_element("google.pubsub") == "src/Google/Pubsub"


def test_from_config_unknown_formatter():
    with pytest.raises(ValueError, match="Unsupported formatter language"):
        CommonCodePathMapper.from_config(PathMapperConfig(formatter="cobol"))


def test_product_config_adapters():
    mapper = CommonCodePathMapper(prefix="gen", append_package=True)
    product_config = ProductConfig(package_name="pkg.sub")
    assert isinstance(mapper, CodePathMapper)
    assert mapper.get_output_path("pkg.sub.Library", product_config) == "gen/pkg/sub"
    assert mapper.get_samples_output_path("pkg.sub.Library", product_config, "getBook") == "gen/samples/pkg/sub/getbook"


def test_product_config_without_package():
    mapper = CommonCodePathMapper(prefix="gen", append_package=True)
    assert mapper.get_output_path("Library", ProductConfig(package_name=None)) == "gen"


def test_non_ascii_segments_with_formatter():
    mapper = CommonCodePathMapper(append_package=True, name_formatter=RubyNameFormatter())
    assert mapper.path_for_element("Straße.Über") == "straße/über"


def test_original_formatter_keeps_segment_text():
    mapper = CommonCodePathMapper(append_package=True, name_formatter=JavaNameFormatter())
    assert mapper.path_for_sample("com.my-pkg", "list_items") == "samples/com/my-pkg/list_items"
