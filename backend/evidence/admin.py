from django.contrib import admin

from .models import Evidence, LabReport


class LabReportInline(admin.TabularInline):
    model = LabReport
    extra = 0
    fields = ("report_number", "analysis_type", "status", "date_submitted", "date_completed")
    show_change_link = True


@admin.register(Evidence)
class EvidenceAdmin(admin.ModelAdmin):
    list_display = ("id", "evidence_number", "type", "status", "case", "date_collected", "user")
    list_filter = ("type", "status")
    search_fields = ("evidence_number", "description", "case__case_number")
    readonly_fields = ("created_at", "updated_at")
    raw_id_fields = ("case",)
    inlines = [LabReportInline]


@admin.register(LabReport)
class LabReportAdmin(admin.ModelAdmin):
    list_display = ("id", "report_number", "analysis_type", "status", "evidence", "lab_tech_name", "user")
    list_filter = ("status",)
    search_fields = ("report_number", "analysis_type", "lab_tech_name", "evidence__evidence_number")
    readonly_fields = ("created_at", "updated_at")
    raw_id_fields = ("evidence",)
