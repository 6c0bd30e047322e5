from django.contrib import admin
from django.utils.html import format_html

from .forms import IdlePolicyForm
from .models import ActivityRecord, IdlePolicySetting


# --------------------------
# Idle policy (per scope)
# --------------------------
@admin.register(IdlePolicySetting)
class IdlePolicySettingAdmin(admin.ModelAdmin):
    form = IdlePolicyForm
    list_display = ("scope", "max_idle_seconds", "mode_badge", "updated_at")
    list_filter = ("scope", "silent_logout")
    readonly_fields = ("updated_at",)
    ordering = ("scope",)

    def mode_badge(self, obj):
        label, color = ("silent", "#334155") if obj.silent_logout else ("redirect", "#2563eb")
        return format_html(
            '<span style="display:inline-block;padding:2px 8px;border-radius:12px;background:{}20;color:{};border:1px solid {}40;font-size:12px;">{}</span>',
            color, color, color, label
        )

    mode_badge.short_description = "On expiry"
    mode_badge.admin_order_field = "silent_logout"


# --------------------------
# Activity records (read only)
# --------------------------
@admin.register(ActivityRecord)
class ActivityRecordAdmin(admin.ModelAdmin):
    list_display = ("key", "value", "updated_at")
    search_fields = ("key",)
    readonly_fields = ("key", "value", "updated_at")
    date_hierarchy = "updated_at"
    ordering = ("-updated_at",)

    actions = ["clear_records"]

    def has_add_permission(self, request):
        return False

    @admin.action(description="Clear selected activity records")
    def clear_records(self, request, queryset):
        # next request of those users starts a fresh idle window
        deleted, _ = queryset.delete()
        self.message_user(request, f"Cleared {deleted} activity record(s).")


# --------------------------
# Admin site branding
# --------------------------
admin.site.site_header = "Idle Logout Admin"
admin.site.site_title = "Idle Logout Admin"
admin.site.index_title = "Administration"
