"""
初始化角色数据
Seed the role table with every known role type (idempotent).
"""
import asyncio

from wallet_backend.core.config import get_settings
from wallet_backend.db.models import RoleType
from wallet_backend.infrastructure.database.repositories import SqlRoleRepository
from wallet_backend.infrastructure.database.session import (
    TransactionScope,
    build_engine,
    build_session_factory,
    init_db,
)


async def seed_roles() -> None:
    engine = build_engine(get_settings())
    await init_db(engine)

    scope = TransactionScope(build_session_factory(engine))
    async with scope.read_write() as session:
        created = await SqlRoleRepository(session).ensure_types(list(RoleType))

    await engine.dispose()

    if not created:
        print("角色数据已存在,无需初始化")
        return
    print("=" * 50)
    for role in created:
        print(f"已创建角色: {role.type.value}")
    print("=" * 50)


if __name__ == "__main__":
    asyncio.run(seed_roles())
