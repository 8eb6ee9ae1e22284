"""分类路由"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ...database import get_db
from ...errors import BadRequestError, NotFoundError
from ...models import User
from ...schemas import CategoryCreate, CategoryResponse, IdResponse
from ...store import categories as category_store
from ..deps import get_admin_user

router = APIRouter()


@router.get("", response_model=List[CategoryResponse], name="categories.list")
async def list_categories(db: AsyncSession = Depends(get_db)):
    """获取分类列表"""
    return await category_store.get_all_categories(db)


@router.get("/{category_id}", response_model=CategoryResponse, name="categories.getById")
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    """获取单个分类"""
    category = await category_store.get_category_by_id(db, category_id)
    if not category:
        raise NotFoundError("分类不存在")
    return category


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED, name="categories.create")
async def create_category(
    category_in: CategoryCreate,
    current_user: User = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db)
):
    """创建分类（管理员）"""
    if await category_store.get_category_by_slug(db, category_in.slug):
        raise BadRequestError("分类标识已存在")

    category_id = await category_store.create_category(db, **category_in.model_dump())
    return IdResponse(id=category_id)
