# emojicopypaster/app/catalog/forms.py
from django import forms


class EmojiUploadForm(forms.Form):
    """
    A simple form for uploading an emoji catalog file.
    """
    file = forms.FileField(
        label="Select Emoji File (.xlsx, .csv)",
        widget=forms.FileInput(attrs={'accept': '.xlsx, .csv'})
    )

    def clean_file(self):
        file = self.cleaned_data['file']
        if not file.name.endswith(('.csv', '.xlsx')):
            raise forms.ValidationError("Invalid file format. Please upload a .csv or .xlsx file.")
        return file
