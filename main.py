"""
Mail Fetcher - 邮件收取服务入口

运行：
    uv run python main.py

或使用 uvicorn：
    uv run uvicorn main:app --host 0.0.0.0 --port 8000 --reload

API 文档：
    http://localhost:8000/docs
"""

from interfaces.api import create_app

# 导出 FastAPI app (用于 uvicorn)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    print("=" * 50)
    print("启动 Mail Fetcher")
    print("=" * 50)
    print()
    print("API 端点:")
    print("  POST /api/v1/fetch  - 执行一次收取周期")
    print("  GET  /health        - 健康检查")
    print()
    print("文档: http://localhost:8000/docs")
    print("=" * 50)

    uvicorn.run(app, host="0.0.0.0", port=8000)
