from django.contrib import admin
from .models import Todo


@admin.register(Todo)
class TodoAdmin(admin.ModelAdmin):
    list_display = ('user', 'content', 'category', 'completed', 'due_date', 'created_at')
    list_filter = ('completed', 'category')
    search_fields = ('content', 'user__username')
