from apps.arg_parser import SearchAppArgParser

APP_ENVS = {
    "app_name": "Video Catalog Search",
    "host": "0.0.0.0",
    "port": {"prod": 21001, "dev": 21011},
    "recall_mode": {"prod": "broad", "dev": "staged"},
    "corpus_path": None,
}


def test_mode_selects_values():
    envs = SearchAppArgParser(argv=["-m", "dev"]).update_app_envs(APP_ENVS)
    assert envs["mode"] == "dev"
    assert envs["port"] == 21011
    assert envs["recall_mode"] == "staged"


def test_args_override_envs():
    argv = ["-p", "9000", "-rm", "staged", "-c", "videos.json", "-v"]
    envs = SearchAppArgParser(argv=argv).update_app_envs(APP_ENVS)
    assert envs["mode"] == "prod"
    assert envs["port"] == 9000
    assert envs["recall_mode"] == "staged"
    assert envs["corpus_path"] == "videos.json"
    assert envs["verbose"] is True
    # source envs untouched
    assert APP_ENVS["port"] == {"prod": 21001, "dev": 21011}
