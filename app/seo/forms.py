# emojicopypaster/app/seo/forms.py
from django import forms
from .models import EmojiPage
from .keywords import slugify_keyword


class EmojiPageForm(forms.ModelForm):
    """Manual admin edits; everything else on a page is generated."""

    class Meta:
        model = EmojiPage
        fields = ['title', 'meta_description', 'content']


class GenerateKeywordForm(forms.Form):
    keyword = forms.CharField(max_length=255)
    force = forms.BooleanField(required=False)

    def clean_keyword(self):
        keyword = self.cleaned_data['keyword'].strip()
        if not slugify_keyword(keyword):
            raise forms.ValidationError("Keyword must contain at least one letter or number.")
        return keyword


class BatchGenerateForm(forms.Form):
    count = forms.IntegerField(min_value=1, max_value=100, required=False)
