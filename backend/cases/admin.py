from django.contrib import admin

from .models import Case


@admin.register(Case)
class CaseAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "case_number",
        "title",
        "status",
        "priority",
        "date_opened",
        "lead_officer",
        "user",
    )
    list_filter = ("status", "priority")
    search_fields = ("case_number", "title", "location")
    readonly_fields = ("created_at", "updated_at")
    raw_id_fields = ("lead_officer",)
