# emojicopypaster/app/seo/views.py
from django.conf import settings
from django.shortcuts import render, get_object_or_404
from django.http import JsonResponse
from django.urls import reverse
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST
from django_ratelimit.decorators import ratelimit
from functools import wraps
from urllib.parse import quote
import logging

from catalog.models import Emoji
from core.models import SiteSetting
from core.views import staff_required, request_data
from .forms import BatchGenerateForm, EmojiPageForm, GenerateKeywordForm
from .generation import (
    add_keywords, delete_all_pages, generate_catalog_pages,
    generate_page, generate_pending_pages,
)
from .models import EmojiPage


logger = logging.getLogger(__name__)


def generate_rate(group, request):
    return getattr(settings, 'SEO_GENERATE_RATE', '30/h')


@require_GET
def api_page_list(request):
    pages = EmojiPage.objects.all()
    return JsonResponse([page.to_dict() for page in pages], safe=False)


@require_GET
def api_page_detail(request, slug):
    page = get_object_or_404(EmojiPage, slug=slug)
    return JsonResponse(page.to_dict())


def page_detail_on_get(action_view, slug):
    """
    Serves the page stored under `slug` on GET and `action_view` otherwise, so
    fixed action paths under api/pages/ never hide a page with the same slug.
    """
    @wraps(action_view)
    def _dispatch(request, *args, **kwargs):
        if request.method == 'GET':
            return api_page_detail(request, slug)
        return action_view(request, *args, **kwargs)
    return _dispatch


@csrf_exempt
@require_POST
@ratelimit(key='ip', rate=generate_rate, method='POST', block=True)
def api_generate_page(request):
    """
    Generates the page for a visitor- or admin-supplied keyword. Returns 201
    when a new page was created, 200 when an existing page is returned or
    regenerated.
    """
    try:
        data = request_data(request)
    except ValueError as e:
        return JsonResponse({'success': False, 'error': f"Invalid JSON: {e}"}, status=400)

    form = GenerateKeywordForm(data)
    if not form.is_valid():
        return JsonResponse({'success': False, 'errors': form.errors}, status=400)

    # Only staff may force regeneration of an existing page.
    force = form.cleaned_data['force'] and request.user.is_staff

    try:
        page, created = generate_page(form.cleaned_data['keyword'], force=force)
    except Exception as e:
        logger.exception(f"[api_generate_page] Error generating page: {e}")
        return JsonResponse({'success': False, 'error': 'Failed to generate page'}, status=500)

    return JsonResponse(page.to_dict(), status=201 if created else 200)


@staff_required
@require_POST
def api_generate_batch(request):
    try:
        data = request_data(request)
    except ValueError as e:
        return JsonResponse({'success': False, 'error': f"Invalid JSON: {e}"}, status=400)

    form = BatchGenerateForm(data)
    if not form.is_valid():
        return JsonResponse({'success': False, 'errors': form.errors}, status=400)

    try:
        generated = generate_pending_pages(form.cleaned_data['count'])
    except Exception as e:
        logger.exception(f"[api_generate_batch] Error batch generating: {e}")
        return JsonResponse({'success': False, 'error': 'Failed to batch generate'}, status=500)

    return JsonResponse({
        'generated': generated,
        'remaining': EmojiPage.objects.pending().count(),
    })


@staff_required
@require_POST
def api_generate_emoji_pages(request):
    try:
        summary = generate_catalog_pages()
    except Exception as e:
        logger.exception(f"[api_generate_emoji_pages] Error generating emoji pages: {e}")
        return JsonResponse({'success': False, 'error': 'Failed to generate emoji pages'}, status=500)
    return JsonResponse(summary)


@staff_required
@require_POST
def api_add_keywords(request):
    try:
        data = request_data(request)
    except ValueError as e:
        return JsonResponse({'success': False, 'error': f"Invalid JSON: {e}"}, status=400)

    keywords = data.get('keywords')
    # Form submissions send one keyword per line.
    if isinstance(keywords, str):
        keywords = keywords.splitlines()
    if not isinstance(keywords, list) or not keywords:
        return JsonResponse({'success': False, 'error': 'Keywords array is required'}, status=400)

    try:
        summary = add_keywords(keywords)
    except Exception as e:
        logger.exception(f"[api_add_keywords] Error adding keywords: {e}")
        return JsonResponse({'success': False, 'error': 'Failed to add keywords'}, status=500)
    return JsonResponse(summary)


@staff_required
@require_POST
def api_delete_all_pages(request):
    try:
        deleted = delete_all_pages()
    except Exception as e:
        logger.exception(f"[api_delete_all_pages] Error deleting all pages: {e}")
        return JsonResponse({'success': False, 'error': 'Failed to delete all pages'}, status=500)
    return JsonResponse({'deleted': deleted})


@staff_required
def manage_page_edit(request, page_id):
    page = get_object_or_404(EmojiPage, pk=page_id)

    if request.method == 'GET':
        data = page.to_dict()
        data['update_url'] = reverse('seo:manage_page_edit', args=[page.id])
        return JsonResponse(data)

    if request.method != 'POST':
        return JsonResponse({'success': False, 'error': 'Invalid method'}, status=405)

    try:
        data = request_data(request)
    except ValueError as e:
        return JsonResponse({'success': False, 'error': f"Invalid JSON: {e}"}, status=400)

    # Fields left out of the payload keep their current value.
    payload = {field: data.get(field, getattr(page, field)) for field in EmojiPageForm.Meta.fields}
    form = EmojiPageForm(payload, instance=page)
    if not form.is_valid():
        return JsonResponse({'success': False, 'errors': form.errors}, status=400)

    try:
        page = form.save()
    except Exception as e:
        logger.exception(f"[manage_page_edit] Error updating page {page_id}: {e}")
        return JsonResponse({'success': False, 'error': 'Failed to update page'}, status=500)

    return JsonResponse({'success': True, 'message': f"Page '{page.slug}' updated.", 'page': page.to_dict()})


@staff_required
@require_POST
def manage_page_delete(request, page_id):
    page = get_object_or_404(EmojiPage, pk=page_id)
    slug = page.slug
    page.delete()
    logger.info(f"[manage_page_delete] Deleted page '{slug}'.")
    return JsonResponse({'success': True})


@require_GET
def sitemap_xml(request):
    base_url = SiteSetting.load().base_url
    urls = [{
        'loc': f"{base_url}/",
        'changefreq': 'daily',
        'priority': '1.0',
        'lastmod': timezone.now().date().isoformat(),
    }]

    for category in Emoji.objects.categories():
        category_slug = quote('-'.join(category.lower().split()), safe='')
        urls.append({'loc': f"{base_url}/category/{category_slug}", 'changefreq': 'weekly', 'priority': '0.8'})

    for slug in Emoji.objects.values_list('slug', flat=True):
        urls.append({'loc': f"{base_url}/emoji/{slug}", 'changefreq': 'monthly', 'priority': '0.6'})

    for slug in EmojiPage.objects.generated().values_list('slug', flat=True):
        urls.append({'loc': f"{base_url}/page/{slug}", 'changefreq': 'weekly', 'priority': '0.7'})

    return render(request, 'seo/sitemap.xml', {'urls': urls}, content_type='application/xml')


@require_GET
def robots_txt(request):
    context = {'base_url': SiteSetting.load().base_url}
    return render(request, 'seo/robots.txt', context, content_type='text/plain')
