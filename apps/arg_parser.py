import argparse
import sys

from copy import deepcopy
from tclogger import logger, dict_to_str


class SearchAppArgParser(argparse.ArgumentParser):
    def __init__(self, *args, argv: list[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_arguments()
        if argv is None:
            argv = sys.argv[1:]
        self.args, self.unknown_args = self.parse_known_args(argv)

    def add_arguments(self):
        self.add_argument(
            "-s",
            "--host",
            type=str,
            help=f"Host of app",
        )
        self.add_argument(
            "-p",
            "--port",
            type=int,
            help=f"Port of app",
        )
        self.add_argument(
            "-m",
            "--mode",
            type=str,
            default="prod",
            help=f"Running mode of app",
        )
        self.add_argument(
            "-rm",
            "--recall-mode",
            type=str,
            choices=["broad", "staged"],
            help=f"Recall mode of search: broad or staged (typo tolerant)",
        )
        self.add_argument(
            "-c",
            "--corpus-path",
            type=str,
            help=f"Path of json corpus, which replaces mongo as video source",
        )
        self.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help=f"Log details of each request",
        )

    def update_app_envs(self, app_envs: dict):
        new_app_envs = deepcopy(app_envs)
        mode = self.args.mode
        new_app_envs["mode"] = mode
        for key, val in app_envs.items():
            if isinstance(val, dict) and mode in val.keys():
                new_app_envs[key] = val[mode]

        if self.args.host:
            new_app_envs["host"] = self.args.host
        if self.args.port:
            new_app_envs["port"] = self.args.port
        if self.args.recall_mode:
            new_app_envs["recall_mode"] = self.args.recall_mode
        if self.args.corpus_path:
            new_app_envs["corpus_path"] = self.args.corpus_path
        if self.args.verbose:
            new_app_envs["verbose"] = True

        self.new_app_envs = new_app_envs

        logger.note(f"App Envs:")
        logger.mesg(dict_to_str(new_app_envs))

        return new_app_envs
