from aiogram import Router


def make_root_router() -> Router:
    from .basic import basic_router
    from .protein import protein_router

    router = Router()
    router.include_router(basic_router)
    router.include_router(protein_router)
    return router
