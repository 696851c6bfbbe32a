from slingdeploy.modules.bundlesupport.bundle import get_bundle_symbolic_name, read_manifest
from conftest import write_bundle


def test_symbolic_name_from_manifest(make_bundle):
    assert get_bundle_symbolic_name(make_bundle(symbolic_name="com.example.bundle")) == "com.example.bundle"


def test_symbolic_name_without_directives(make_bundle):
    jar = make_bundle(symbolic_name="com.example.fragment;singleton:=true")
    assert get_bundle_symbolic_name(jar) == "com.example.fragment"


def test_continuation_lines_are_joined(tmp_path):
    manifest = (
        "Manifest-Version: 1.0\r\n"
        "Bundle-SymbolicName: org.apache.sling.some.really.long.symbolic.name.t\r\n"
        " hat.wraps\r\n"
        "Bundle-Version: 2.1.0\r\n"
        "\r\n"
        "Name: com/example/Activator.class\r\n"
        "SHA-256-Digest: abc\r\n"
    )
    jar = write_bundle(tmp_path / "wrapped.jar", manifest)

    headers = read_manifest(jar)

    assert headers["Bundle-SymbolicName"] == "org.apache.sling.some.really.long.symbolic.name.that.wraps"
    assert headers["Bundle-Version"] == "2.1.0"
    assert "SHA-256-Digest" not in headers


def test_plain_jar_is_no_bundle(make_bundle):
    assert get_bundle_symbolic_name(make_bundle(symbolic_name=None)) is None


def test_jar_without_manifest(tmp_path):
    jar = write_bundle(tmp_path / "empty.jar", None)
    assert read_manifest(jar) is None
    assert get_bundle_symbolic_name(jar) is None


def test_missing_file(tmp_path):
    assert get_bundle_symbolic_name(tmp_path / "missing.jar") is None


def test_file_that_is_not_a_zip(tmp_path, caplog):
    text_file = tmp_path / "readme.jar"
    text_file.write_text("not a jar", encoding="utf-8")

    assert get_bundle_symbolic_name(text_file) is None
    assert "Problem checking" in caplog.text


def test_header_names_are_case_insensitive(tmp_path):
    manifest = "Manifest-Version: 1.0\r\nbundle-symbolicname: com.example.lower\r\n\r\n"
    jar = write_bundle(tmp_path / "lower.jar", manifest)

    assert get_bundle_symbolic_name(jar) == "com.example.lower"
