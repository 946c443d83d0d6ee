from fastapi import APIRouter, Request

from services.blogpost_service import BlogPostService

router = APIRouter()
endpoints = [
    {
        "name": "Blog posts",
        "url": "/posts"
    },
    {
        "name": "Health",
        "url": "/health"
    }
]

@router.get("/", response_description="List all entry API endpoints")
async def get_root():
    return endpoints

@router.get("/health", response_description="Service and database status")
async def get_health(request: Request):
    mongodb = request.app.state.mongodb
    # StoreUnavailableException surfaces as 503 through the app's exception handler
    count = await BlogPostService(mongodb).count()
    return {"status": "ok", "database": mongodb.name, "blogposts": count}
