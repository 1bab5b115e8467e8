from types import SimpleNamespace

from bikram_sambat.api import calendar, whitelist


def test_site_db_unavailable_without_frappe(monkeypatch):
    monkeypatch.setattr(whitelist, "frappe", None)
    assert whitelist.site_db_available() is False


def test_site_db_requires_bound_database(monkeypatch):
    monkeypatch.setattr(whitelist, "frappe", SimpleNamespace(local=SimpleNamespace()))
    assert whitelist.site_db_available() is False
    monkeypatch.setattr(whitelist, "frappe", SimpleNamespace(local=SimpleNamespace(db=object())))
    assert whitelist.site_db_available() is True


def test_maybe_whitelist_wraps_with_frappe(monkeypatch):
    registered = []

    def fake_whitelist():
        def decorator(func):
            registered.append(func)
            return func

        return decorator

    monkeypatch.setattr(whitelist, "frappe", SimpleNamespace(whitelist=fake_whitelist))

    def endpoint():
        return "ok"

    assert whitelist.maybe_whitelist(endpoint) is endpoint
    assert registered == [endpoint]


def test_maybe_whitelist_is_identity_without_frappe(monkeypatch):
    monkeypatch.setattr(whitelist, "frappe", None)

    def endpoint():
        return "ok"

    assert whitelist.maybe_whitelist(endpoint) is endpoint


def test_endpoint_modules_use_public_helpers():
    assert calendar.maybe_whitelist is whitelist.maybe_whitelist
