from django.contrib import admin

from .models import Officer


@admin.register(Officer)
class OfficerAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "rank", "badge_number", "user", "created_at")
    list_filter = ("rank",)
    search_fields = ("name", "rank", "badge_number")
    readonly_fields = ("created_at", "updated_at")
