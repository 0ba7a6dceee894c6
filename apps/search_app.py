import uvicorn

from fastapi import FastAPI, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from tclogger import TCLogger
from typing import Optional

from apps.arg_parser import SearchAppArgParser
from configs.envs import SEARCH_APP_ENVS
from recalls.base import VideoRepository
from recalls.memory import MemoryVideoRepository
from videos.constants import SEARCH_FAILED_MSG
from videos.errors import SearchQueryRequired
from videos.searcher import VideoSearcher
from videos.suggester import VideoSuggester

logger = TCLogger()


class SearchApp:
    def __init__(self, app_envs: dict = {}, repository: VideoRepository = None):
        self.title = app_envs.get("app_name")
        self.version = app_envs.get("version")
        self.app = FastAPI(
            docs_url="/",
            title=self.title,
            version=self.version,
            swagger_ui_parameters={"defaultModelsExpandDepth": -1},
        )
        self.app_envs = app_envs
        self.init_searchers(repository)
        self.setup_routes()
        logger.success(f"> {self.title} - v{self.version}")

    def init_repository(self) -> VideoRepository:
        corpus_path = self.app_envs.get("corpus_path")
        if corpus_path:
            return MemoryVideoRepository.from_json(corpus_path)
        # import here, so memory corpus mode never needs a mongo connection
        from networks.mongo import MongoVideoRepository

        return MongoVideoRepository()

    def init_searchers(self, repository: VideoRepository = None):
        self.mode = self.app_envs.get("mode", "prod")
        self.recall_mode = self.app_envs.get("recall_mode", "broad")
        self.verbose = self.app_envs.get("verbose", False)
        self.repository = repository or self.init_repository()
        self.video_searcher = VideoSearcher(
            self.repository, recall_mode=self.recall_mode, verbose=self.verbose
        )
        self.video_suggester = VideoSuggester(self.repository, verbose=self.verbose)

    def search(self, q: Optional[str] = Query(None)):
        try:
            results = self.video_searcher.search(q)
        except SearchQueryRequired as e:
            return JSONResponse({"error": e.message}, status_code=400)
        except Exception as e:
            logger.warn(f"× Error searching videos: {e}")
            return JSONResponse({"error": SEARCH_FAILED_MSG}, status_code=500)
        return JSONResponse(jsonable_encoder(results))

    def suggest(self, q: Optional[str] = Query(None)):
        suggestions = self.video_suggester.suggest(q)
        return {"suggestions": suggestions}

    def setup_routes(self):
        self.app.get(
            "/api/search",
            summary="Get ranked videos by query",
        )(self.search)

        self.app.get(
            "/api/search/suggestions",
            summary="Get autocomplete suggestions by partial query",
        )(self.suggest)


if __name__ == "__main__":
    app_envs = SEARCH_APP_ENVS
    arg_parser = SearchAppArgParser()
    new_app_envs = arg_parser.update_app_envs(app_envs)
    app = SearchApp(new_app_envs).app
    uvicorn.run(app, host=new_app_envs["host"], port=new_app_envs["port"])

    # Production mode by default:
    # python -m apps.search_app

    # Development mode, with a local json corpus:
    # python -m apps.search_app -m dev -c ./data/videos.json
    # python -m apps.search_app -m dev -rm staged -p 21012
