pytest_plugins = ["smartclone.testing.conftest"]
