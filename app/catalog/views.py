# emojicopypaster/app/catalog/views.py
from django.conf import settings
from django.shortcuts import get_object_or_404
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST
from django_ratelimit.decorators import ratelimit
import logging

from core.views import staff_required
from .forms import EmojiUploadForm
from .importing import CatalogImportError, import_catalog, load_dataset
from .models import Emoji


logger = logging.getLogger(__name__)


def copy_rate(group, request):
    return getattr(settings, 'EMOJI_COPY_RATE', '120/m')


@require_GET
def api_emoji_list(request):
    search_query = request.GET.get('search', '').strip()
    category_filter = request.GET.get('category', '').strip()

    emojis = Emoji.objects.search(search_query or None, category_filter or None)
    return JsonResponse([emoji.to_dict() for emoji in emojis], safe=False)


@require_GET
def api_categories(request):
    return JsonResponse(Emoji.objects.categories(), safe=False)


@require_GET
def api_trending(request):
    limit = getattr(settings, 'TRENDING_LIMIT', 50)
    return JsonResponse([emoji.to_dict() for emoji in Emoji.objects.trending(limit)], safe=False)


@require_GET
def api_emoji_detail(request, slug):
    emoji = get_object_or_404(Emoji, slug=slug)
    return JsonResponse(emoji.to_dict())


@csrf_exempt
@require_POST
@ratelimit(key='ip', rate=copy_rate, method='POST', block=True)
def api_copy_emoji(request, emoji_id):
    """
    Records one client-side copy action and returns the updated counter.
    """
    emoji = get_object_or_404(Emoji, pk=emoji_id)
    copy_count = emoji.increment_copy_count()
    return JsonResponse({'copyCount': copy_count})


@staff_required
@require_POST
def api_upload_emojis(request):
    """
    Imports a CSV/XLSX catalog file. Rows are matched on slug; the whole file
    is rejected if the dry run reports any error.
    """
    form = EmojiUploadForm(request.POST, request.FILES)
    if not form.is_valid():
        logger.warning(f"[api_upload_emojis] Form was invalid. Errors: {form.errors.as_json()}")
        return JsonResponse({'success': False, 'errors': form.errors}, status=400)

    file = form.cleaned_data['file']
    logger.info(f"[api_upload_emojis] Processing file: {file.name}")

    try:
        dataset = load_dataset(file.read(), file.name)
    except Exception as e:
        logger.error(f"[api_upload_emojis] Error reading file: {e}", exc_info=True)
        return JsonResponse({'success': False, 'error': f"Error reading file: {e}"}, status=400)

    try:
        rows = import_catalog(dataset)
    except CatalogImportError as e:
        return JsonResponse({'success': False, 'errors': e.errors}, status=400)
    except Exception as e:
        logger.exception(f"[api_upload_emojis] Error during final import: {e}")
        return JsonResponse({'success': False, 'error': 'Failed to import emoji file'}, status=500)

    return JsonResponse({'success': True, 'rows': rows, 'message': "Emoji file imported successfully."})
