from reqkit.proxies import EncodedAuthentication, ProxyAuthentication, Proxies


def test_unicode_encoder():
    user = "一二三"
    phrase = "Hello World!"
    auth = EncodedAuthentication(user, phrase)
    assert auth.username == "%E4%B8%80%E4%BA%8C%E4%B8%89"
    assert auth.password == "Hello%20World%21"


def test_plain_values_unchanged():
    auth = EncodedAuthentication("user", "password")
    assert auth.username == "user"
    assert auth.password == "password"


def test_default_authentication_is_empty():
    auth = EncodedAuthentication()
    assert auth.username == ""
    assert auth.password == ""


def test_proxies_lookup():
    proxies = Proxies({"http": "http://proxy.example.com:3128"})
    assert proxies.has("http")
    assert not proxies.has("https")
    assert proxies["http"] == "http://proxy.example.com:3128"
    assert "http" in proxies
    assert len(proxies) == 1


def test_proxies_missing_protocol_gives_empty_string():
    proxies = Proxies()
    assert proxies["https"] == ""
    assert not proxies.has("https")


def test_proxy_authentication():
    auth = ProxyAuthentication({"http": EncodedAuthentication("user", "password")})
    assert auth.has("http")
    assert not auth.has("https")
    assert auth.username("http") == "user"
    assert auth.password("http") == "password"


def test_proxy_authentication_missing_protocol():
    auth = ProxyAuthentication()
    assert auth.username("https") == ""
    assert auth.password("https") == ""
    assert not auth.has("https")


def test_repr_hides_password():
    auth = EncodedAuthentication("user", "password")
    assert "password'" not in repr(auth)
    assert "user" in repr(auth)