from fastapi import APIRouter, Request, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from models.posts import BlogPostCreate, BlogPostList, BlogPostUpdate, BlogPostView
from services.blogpost_service import BlogPostService
from exceptions import ValidationException
from logging_config import logger

router = APIRouter()


def get_blogpost_service(request: Request) -> BlogPostService:
  return BlogPostService(request.app.state.mongodb)


# list all posts
@router.get("",
            response_description="List all blog posts",
            response_model=BlogPostList)
async def get_posts(
    service: BlogPostService = Depends(get_blogpost_service)
) -> JSONResponse:
  posts = await service.list_all()
  result = BlogPostList(blogposts=[BlogPostView.from_db(post) for post in posts])
  return JSONResponse(status_code=status.HTTP_200_OK,
                      content=jsonable_encoder(result))


# get post by id
@router.get("/{id}",
            response_description="Get blog post by id",
            response_model=BlogPostView)
async def get_post(
    id: str,
    service: BlogPostService = Depends(get_blogpost_service)
) -> JSONResponse:
  post = await service.find_by_id(id)
  return JSONResponse(status_code=status.HTTP_200_OK,
                      content=jsonable_encoder(BlogPostView.from_db(post)))


# create post
@router.post("",
             response_description="Create blog post",
             response_model=BlogPostView,
             status_code=status.HTTP_201_CREATED)
async def create_post(
    post: BlogPostCreate,
    service: BlogPostService = Depends(get_blogpost_service)
) -> JSONResponse:
  created_post = await service.create(post)
  return JSONResponse(status_code=status.HTTP_201_CREATED,
                      content=jsonable_encoder(BlogPostView.from_db(created_post)))


# update post
@router.put("/{id}",
            response_description="Update blog post",
            response_model=BlogPostView,
            status_code=status.HTTP_201_CREATED)
async def update_post(
    id: str,
    patch: BlogPostUpdate,
    service: BlogPostService = Depends(get_blogpost_service)
) -> JSONResponse:
  if patch.id is not None and patch.id != id:
    logger.warning(f"Rejected update: path id {id} does not match body id {patch.id}")
    raise ValidationException(
        field="id",
        message=f"Request path id ({id}) and request body id ({patch.id}) must match",
        details={"path_id": id, "body_id": patch.id}
    )

  updated_post = await service.update_by_id(id, patch)
  return JSONResponse(status_code=status.HTTP_201_CREATED,
                      content=jsonable_encoder(BlogPostView.from_db(updated_post)))


# delete post
@router.delete("/{id}",
               response_description="Delete blog post",
               status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    id: str,
    service: BlogPostService = Depends(get_blogpost_service)
) -> Response:
  await service.delete_by_id(id)
  return Response(status_code=status.HTTP_204_NO_CONTENT)
