def test_package_imports():
    """Verify all submodules can be imported without errors."""
    import sonic_uploader
    import sonic_uploader.build
    import sonic_uploader.cli
    import sonic_uploader.client
    import sonic_uploader.core
    import sonic_uploader.locator
    import sonic_uploader.orchestrator

    assert sonic_uploader.__version__
