import pytest

from htmlgen.errors import RouteNotDefined
from htmlgen.urls import StaticUrlGenerator, is_absolute_url


@pytest.fixture
def urls() -> StaticUrlGenerator:
    return StaticUrlGenerator(
        "http://example.test/",
        routes={
            "post.show": "/posts/{slug}",
            "post.page": "/posts/{slug}/{page?}",
            "user.post": "/users/{user}/posts/{post}",
        },
        actions={"PostController@index": "/posts"},
    )


def test_asset_joins_base(urls: StaticUrlGenerator):
    assert urls.asset("css/app.css") == "http://example.test/css/app.css"
    assert urls.asset("/css/app.css") == "http://example.test/css/app.css"


def test_secure_asset_switches_scheme(urls: StaticUrlGenerator):
    assert urls.asset("css/app.css", True) == "https://example.test/css/app.css"


def test_explicit_secure_base():
    urls = StaticUrlGenerator("http://example.test", secure_base_url="https://cdn.example.test")
    assert urls.to("login", secure=True) == "https://cdn.example.test/login"


def test_absolute_urls_pass_through(urls: StaticUrlGenerator):
    for url in ["https://other.test/x", "//cdn.test/y", "mailto:a@b.test", "#top"]:
        assert is_absolute_url(url)
        assert urls.to(url) == url
        assert urls.asset(url) == url


def test_to_appends_parameters_as_segments(urls: StaticUrlGenerator):
    assert urls.to("user", [1, "a b"]) == "http://example.test/user/1/a%20b"
    assert urls.to("/user/", {"id": 5}) == "http://example.test/user/5"


def test_route_fills_placeholders(urls: StaticUrlGenerator):
    assert urls.route("post.show", {"slug": "hello"}) == "http://example.test/posts/hello"
    assert urls.route("user.post", [5, 7]) == "http://example.test/users/5/posts/7"


def test_route_optional_placeholder(urls: StaticUrlGenerator):
    assert urls.route("post.page", {"slug": "hello"}) == "http://example.test/posts/hello"
    assert urls.route("post.page", {"slug": "hello", "page": 2}) == (
        "http://example.test/posts/hello/2"
    )


def test_route_leftover_parameters_become_query(urls: StaticUrlGenerator):
    assert urls.route("post.show", {"slug": "hello", "sort": "new"}) == (
        "http://example.test/posts/hello?sort=new"
    )


def test_action(urls: StaticUrlGenerator):
    assert urls.action("PostController@index") == "http://example.test/posts"


def test_unknown_route_and_action(urls: StaticUrlGenerator):
    with pytest.raises(RouteNotDefined):
        urls.route("missing")
    with pytest.raises(RouteNotDefined) as excinfo:
        urls.action("Missing@index")
    assert excinfo.value.kind == "action"


def test_empty_base_produces_root_relative_urls():
    urls = StaticUrlGenerator()
    assert urls.asset("img/a.png") == "/img/a.png"
    assert urls.to("about") == "/about"
