from django.contrib import admin
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['title', 'status', 'user', 'created_at']
    list_filter = ['status']
    search_fields = ['title', 'description', 'user__name', 'user__email']
    list_select_related = ['user']
    readonly_fields = ['id', 'created_at']
