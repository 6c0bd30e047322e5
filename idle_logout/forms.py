from django import forms

from .models import IdlePolicySetting
from .policy import clamp_max_idle_seconds


class IdlePolicyForm(forms.ModelForm):
    max_idle_seconds = forms.IntegerField(
        help_text="Minimum 60 seconds; smaller values fall back to 3600.",
    )

    class Meta:
        model = IdlePolicySetting
        fields = ["scope", "max_idle_seconds", "idle_message", "silent_logout"]
        widgets = {
            "idle_message": forms.Textarea(attrs={"rows": 3}),
        }

    def clean_max_idle_seconds(self):
        # clamped rather than rejected
        return clamp_max_idle_seconds(self.cleaned_data.get("max_idle_seconds"))
