"""ADF Validator MCPサーバーのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    import logging

    import uvicorn

    from adfvalidator.config import ValidatorConfig
    from adfvalidator.server import create_server

    config = ValidatorConfig()
    logging.basicConfig(level=config.log_level.upper())
    mcp = create_server(config)
    app = mcp.http_app(transport="streamable-http")
    uvicorn.run(app, host=config.host, port=config.port)
