"""Pytest 配置文件"""

from urllib.parse import parse_qs

import pytest
from fastapi import FastAPI, Query, Request
from fastapi.responses import PlainTextResponse
from fastapi.responses import Response as FastAPIResponse
from fastapi.testclient import TestClient

from libs.assured import HttpxTransport, defaults


def pytest_configure(config):
    """Pytest 配置钩子"""
    # 注册自定义标记
    config.addinivalue_line(
        "markers",
        "integration: test drives the in-process HTTP server through the filter chain",
    )


async def _form(request: Request) -> dict[str, list[str]]:
    return parse_qs((await request.body()).decode("iso-8859-1"))


def create_test_app() -> FastAPI:
    """测试用 HTTP 服务"""
    app = FastAPI()

    @app.get("/greetJSON")
    def greet_json(first_name: str = Query(alias="firstName"), last_name: str = Query(alias="lastName")):
        return {"greeting": {"firstName": first_name, "lastName": last_name}}

    @app.get("/greetXML")
    def greet_xml(first_name: str = Query(alias="firstName"), last_name: str = Query(alias="lastName")):
        content = f"<greeting><firstName>{first_name}</firstName><lastName>{last_name}</lastName></greeting>"
        return FastAPIResponse(content=content, media_type="application/xml")

    @app.post("/greet")
    async def greet(request: Request):
        form = await _form(request)
        return {
            "greeting": f"Greetings {form['firstName'][0]} {form['lastName'][0]}",
            "contentType": request.headers.get("content-type"),
        }

    @app.get("/lotto")
    def lotto():
        return {
            "lotto": {
                "lottoId": 5,
                "winning-numbers": [2, 45, 34, 23, 7, 5, 3],
                "winners": [
                    {"winnerId": 23, "numbers": [2, 45, 34, 23, 3, 5]},
                    {"winnerId": 54, "numbers": [52, 3, 12, 11, 18, 22]},
                ],
            }
        }

    @app.get("/409")
    def conflict():
        return PlainTextResponse("ERROR", status_code=409)

    @app.get("/headers")
    def echo_headers(request: Request):
        return dict(request.headers)

    @app.get("/formAuth")
    def form_auth(request: Request):
        if request.cookies.get("jsessionid") == "1234":
            return PlainTextResponse("OK")
        return PlainTextResponse("NOT AUTHORIZED", status_code=401)

    @app.post("/j_spring_security_check")
    async def login(request: Request):
        form = await _form(request)
        if form.get("j_username") == ["John"] and form.get("j_password") == ["Doe"]:
            response = PlainTextResponse("OK")
            response.set_cookie("jsessionid", "1234")
            return response
        return PlainTextResponse("NOT AUTHORIZED", status_code=401)

    @app.get("/{first_name}/{last_name}")
    def full_name(first_name: str, last_name: str):
        return {"firstName": first_name, "lastName": last_name, "fullName": f"{first_name} {last_name}"}

    return app


@pytest.fixture(scope="session")
def test_app():
    """创建测试应用"""
    return create_test_app()


@pytest.fixture
def server(test_app):
    """把默认传输指向进程内测试服务"""
    with TestClient(test_app) as client:
        transport = HttpxTransport(client=client)
        defaults.transport = transport
        yield transport


@pytest.fixture(autouse=True)
def reset_defaults():
    """每个测试结束后恢复全局默认值"""
    yield
    defaults.reset()
