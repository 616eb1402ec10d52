"""
URL configuration for the Users & Tasks API.
"""
from django.contrib import admin
from django.urls import path
from ninja import NinjaAPI

from apps.core.errors import register_exception_handlers

api = NinjaAPI(
    title="API de Gerenciamento de Usuários e Tarefas",
    version="1.0.0",
    description="API REST para gerenciamento de usuários e tarefas",
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
)
register_exception_handlers(api)

from apps.core.api import router as health_router
from apps.users.api import router as users_router
from apps.tasks.api import router as tasks_router

api.add_router("", health_router)
api.add_router("/users", users_router)
api.add_router("/tasks", tasks_router)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', api.urls),
]
