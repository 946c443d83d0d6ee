from bson import ObjectId
from pydantic import Field, BaseModel, ConfigDict, field_validator
from pydantic_core import core_schema
from typing import Optional, Any
from datetime import datetime, timezone
from utils import author_full_name, prevent_empty_str


class PyObjectId(str):
  """Document id stored either as an ObjectId or as its hex string; always exposed as str"""

  @classmethod
  def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
    return core_schema.no_info_plain_validator_function(
      cls.validate,
      serialization=core_schema.plain_serializer_function_ser_schema(
        lambda x: str(x), return_schema=core_schema.str_schema()
      ),
    )

  @classmethod
  def validate(cls, v: Any) -> str:
    if isinstance(v, ObjectId):
      return str(v)
    if isinstance(v, str) and v:
      return v
    raise ValueError("Invalid ObjectId")

  @classmethod
  def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict:
    return {"type": "string", "format": "objectid"}


class MongoBaseModel(BaseModel):
  model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

  id: PyObjectId = Field(default_factory=lambda: str(ObjectId()), alias="_id")


class Author(BaseModel):
  firstName: str = Field(...)
  lastName: str = Field(...)

  @field_validator('firstName', 'lastName', mode='before')
  @classmethod
  def validate_null_strings(cls, v, info):
    return prevent_empty_str(v, info.field_name)

  @property
  def fullName(self) -> str:
    return author_full_name(self.firstName, self.lastName)


# Blog posts
# ------------


class BlogPostBase(BaseModel):
  title: str = Field(...)
  content: str = Field(...)
  author: Author = Field(...)

  @field_validator('title', 'content', mode='before')
  @classmethod
  def validate_null_strings(cls, v, info):
    return prevent_empty_str(v, info.field_name)


class BlogPostCreate(BlogPostBase):
  created: Optional[datetime] = None

  @field_validator('created')
  @classmethod
  def normalize_to_utc(cls, v):
    # MongoDB stores UTC and hands back naive datetimes
    if v is not None and v.tzinfo is not None:
      return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


class BlogPostDB(MongoBaseModel, BlogPostBase):
  created: datetime = Field(...)


class BlogPostUpdate(BaseModel):
  """Partial update: every field is optional and applied independently."""
  model_config = ConfigDict(extra='ignore')

  id: Optional[str] = None
  title: Optional[str] = None
  content: Optional[str] = None

  @field_validator('title', 'content', mode='before')
  @classmethod
  def validate_null_strings(cls, v, info):
    # null means "leave unchanged", an empty string is never a valid value
    if v is None:
      return v
    return prevent_empty_str(v, info.field_name)

  def updates(self) -> dict:
    return self.model_dump(include={'title', 'content'}, exclude_none=True)


class BlogPostView(BaseModel):
  id: str
  title: str
  content: str
  author: str
  created: datetime

  @classmethod
  def from_db(cls, post: BlogPostDB) -> "BlogPostView":
    return cls(
        id=post.id,
        title=post.title,
        content=post.content,
        author=post.author.fullName,
        created=post.created,
    )


class BlogPostList(BaseModel):
  blogposts: list[BlogPostView] = Field(default_factory=list)
