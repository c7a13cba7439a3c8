from django.contrib import admin

from .models import Suspect


@admin.register(Suspect)
class SuspectAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "status", "age", "case", "user", "created_at")
    list_filter = ("status",)
    search_fields = ("name", "address", "case__case_number")
    readonly_fields = ("created_at", "updated_at")
    raw_id_fields = ("case",)
