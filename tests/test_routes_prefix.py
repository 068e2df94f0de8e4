from webhook_inspector.main import app

EXPECTED_ROUTES = {
    ("/", "GET"),
    ("/", "POST"),
    ("/health", "GET"),
}


def test_expected_routes_are_registered():
    registered = {
        (route.path, method)
        for route in app.routes
        if hasattr(route, "methods")
        for method in route.methods
    }
    for expected in EXPECTED_ROUTES:
        assert expected in registered, f"Route {expected} not registered"


def test_module_app_has_a_secret():
    assert app.state.settings.secret
    assert app.state.store.count() == 0
