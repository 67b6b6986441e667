from tgkit.net.url import Url


def test_full_url():
    url = Url.parse("https://api.telegram.org/bot/getMe?x=1&y=2#frag")
    assert url.protocol == "https"
    assert url.host == "api.telegram.org"
    assert url.path == "/bot/getMe"
    assert url.query == "x=1&y=2"
    assert url.fragment == "frag"


def test_host_only_has_empty_path():
    url = Url.parse("http://example.com")
    assert (url.protocol, url.host, url.path, url.query, url.fragment) == (
        "http",
        "example.com",
        "",
        "",
        "",
    )


def test_query_right_after_host_gets_root_path():
    url = Url.parse("http://example.com?a=b")
    assert url.host == "example.com"
    assert url.path == "/"
    assert url.query == "a=b"


def test_fragment_right_after_host_gets_root_path():
    url = Url.parse("http://example.com#top")
    assert url.path == "/"
    assert url.query == ""
    assert url.fragment == "top"


def test_query_may_contain_question_mark():
    url = Url.parse("http://h/p?a?b#c#d")
    assert url.path == "/p"
    assert url.query == "a?b"
    assert url.fragment == "c#d"


def test_port_stays_in_host():
    url = Url.parse("http://127.0.0.1:8080/hook")
    assert url.host == "127.0.0.1:8080"
    assert url.path == "/hook"


def test_without_scheme_everything_is_protocol():
    url = Url.parse("example")
    assert url.protocol == "example"
    assert url.host == ""
    assert url.path == ""


def test_equality_of_parsed_urls():
    assert Url.parse("https://a/b?c") == Url(protocol="https", host="a", path="/b", query="c")