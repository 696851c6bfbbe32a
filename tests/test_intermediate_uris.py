from slingdeploy.modules.bundlesupport.deploy import extract_intermediate_uris


def test_extract_paths_deepest_first():
    assert extract_intermediate_uris("http://localhost:8080/apps/slingshot/install") == [
        "http://localhost:8080/apps/slingshot/install",
        "http://localhost:8080/apps/slingshot",
        "http://localhost:8080/apps",
    ]


def test_extract_paths_trailing_slash_is_ignored():
    with_slash = extract_intermediate_uris("http://localhost:8080/apps/slingshot/install/")
    without_slash = extract_intermediate_uris("http://localhost:8080/apps/slingshot/install")
    assert with_slash == without_slash


def test_extract_paths_without_path_is_empty():
    assert extract_intermediate_uris("http://localhost:8080") == []
    assert extract_intermediate_uris("http://localhost:8080/") == []


def test_extract_paths_skips_empty_segments_and_drops_query():
    assert extract_intermediate_uris("https://user@host/a//b?x=1#frag") == [
        "https://user@host/a/b",
        "https://user@host/a",
    ]


def test_extract_paths_is_repeatable():
    uri = "http://h:8080/dav/default/libs/sling/install"
    assert extract_intermediate_uris(uri) == extract_intermediate_uris(uri)
    assert len(extract_intermediate_uris(uri)) == 5
