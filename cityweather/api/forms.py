from __future__ import annotations

from django import forms


class CityForm(forms.Form):
    # Passed through untouched; only an empty value is rejected, by the presenter.
    city = forms.CharField(required=False, strip=False)
