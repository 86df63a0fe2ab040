# emojicopypaster/app/seo/content.py
from .keywords import title_case

POPULAR_LIMIT = 10


def _popular_lines(related, clean_keyword):
    lines = []
    for emoji in related[:POPULAR_LIMIT]:
        description = emoji.description or f"A popular emoji for expressing {clean_keyword}"
        lines.append(f"- {emoji.emoji} **{emoji.name}** - {description}")
    return '\n'.join(lines)


def _related_sentence(related):
    if not related:
        return ''
    samples = ', '.join(f"{emoji.emoji} {emoji.name}" for emoji in related[:POPULAR_LIMIT])
    return f"Related emojis include {samples}."


def generate_seo_content(keyword, related):
    """
    Renders the long-form markdown landing page for a keyword. Always returns
    the full document; with no related emoji the "Popular" list is empty and
    the "Related emojis include" sentence is left out.
    """
    title = title_case(keyword)
    clean_keyword = keyword.replace(' emoji', '', 1)

    return f"""# {title} - Copy & Paste

Looking for the perfect **{keyword}** to use in your messages? You've come to the right place! Simply click any emoji below to copy it to your clipboard instantly.

## Popular {title}s

{_popular_lines(related, clean_keyword)}

## How to Use {title}

Using {keyword}s is easy! Just click on any emoji above and it will be copied to your clipboard. Then paste it anywhere - in text messages, social media posts, emails, or documents.

### How to Use {title} on iPhone

1. Visit this page on your iPhone's Safari or Chrome browser
2. Tap the {keyword} you want to copy
3. The emoji is now copied to your clipboard
4. Open any app like iMessage, WhatsApp, Instagram, or Notes
5. Tap and hold the text field and select **Paste**
6. You can also access emojis through your iPhone keyboard by tapping the smiley face icon

### How to Use {title} on Android

1. Open this page in Chrome or any browser on your Android phone
2. Tap the {keyword} you want to use
3. It will be copied to your clipboard automatically
4. Switch to any app like Messages, WhatsApp, Telegram, or Facebook
5. Long press in the text field and tap **Paste**
6. Android users can also find emojis by tapping the emoji icon on the Gboard keyboard

### How to Use {title} on PC (Windows & Mac)

1. Open this page on your computer browser (Chrome, Firefox, Edge, or Safari)
2. Click on the {keyword} you want to copy
3. The emoji is instantly copied to your clipboard
4. Open any app or website where you want to paste it
5. Press **Ctrl+V** (Windows) or **Cmd+V** (Mac) to paste
6. On Windows, you can also press **Win + .** (period) to open the emoji picker. On Mac, press **Ctrl + Cmd + Space**

## About {title}

The {keyword} is one of the most popular emojis used in digital communication. It helps convey emotions and add personality to text-based conversations. {_related_sentence(related)}

## Frequently Asked Questions

### How do I copy the {keyword}?
Simply click on the emoji and it will be automatically copied to your clipboard. Then use Ctrl+V (or Cmd+V on Mac) to paste it anywhere.

### Can I use the {keyword} on any device?
Yes! Emojis are universal and work on all modern devices including iPhone, Android, Windows, and Mac computers.

### What does the {keyword} mean?
The {keyword} is commonly used to express feelings related to {clean_keyword}. Its meaning can vary slightly depending on context and culture.

### Do {keyword}s look the same on iPhone and Android?
{title}s may look slightly different on iPhone (Apple) vs Android (Google) devices. Each platform has its own emoji design style, but the meaning stays the same.

### Can I use {keyword}s in emails?
Yes! You can paste {keyword}s into any email client including Gmail, Outlook, Yahoo Mail, and Apple Mail. They work in both the subject line and the body of the email."""
