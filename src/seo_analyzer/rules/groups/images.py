# src/seo_analyzer/rules/groups/images.py
from typing import List

from seo_analyzer.constants import ALT_TEXT_MIN_LENGTH, ALT_TEXT_MIN_RATIO
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.text.normalizer import normalize, significant_words

GROUP = "images"
make = CheckFactory(GROUP)

# Pages where imagery is optional.
IMAGE_OPTIONAL_TYPES = ("legal", "contact", "form")


def _alt_check(total: int, with_alt: int) -> Check:
    ratio = with_alt / total
    if ratio >= ALT_TEXT_MIN_RATIO:
        if with_alt == total:
            return make("images-alt", "Alt text", "pass", f"All {total} images have alt text.", "important", 2)
        return make(
            "images-alt", "Alt text", "warning", f"{total - with_alt} of {total} images lack alt text.",
            "important", 2, tip="Describe every meaningful image for screen readers and image search.",
        )
    return make(
        "images-alt", "Alt text", "fail", f"Only {with_alt} of {total} images have alt text.", "important", 2,
        tip="Describe every meaningful image for screen readers and image search.",
    )


def _descriptive_alt(alt: str, keyword: str) -> bool:
    normalized = normalize(alt)
    if keyword in normalized:
        return True
    if any(w in normalized for w in significant_words(keyword)):
        return True
    return len(alt) >= ALT_TEXT_MIN_LENGTH


@check_spec(ids=["images-alt", "images-alt-keyword", "images-present", "images-quantity"])
def check_images(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    stats = ctx.image_stats

    if ctx.page_type in IMAGE_OPTIONAL_TYPES:
        if stats.total > 0:
            if stats.with_alt == stats.total:
                checks.append(make(
                    "images-alt", "Alt text", "pass", f"All {stats.total} images have alt text.", "important", 2,
                ))
            else:
                checks.append(make(
                    "images-alt", "Alt text", "warning",
                    f"{stats.total - stats.with_alt} of {stats.total} images lack alt text.", "important", 2,
                    tip="Describe every meaningful image.",
                ))
        checks.append(make(
            "images-present", "Images", "pass", "Images are optional on this type of page.", "bonus", 1,
        ))
        return checks

    if stats.total > 0:
        checks.append(_alt_check(stats.total, stats.with_alt))

    keyword = ctx.normalized_keyword
    if keyword and stats.alt_texts:
        if any(_descriptive_alt(alt, keyword) for alt in stats.alt_texts):
            checks.append(make(
                "images-alt-keyword", "Descriptive alt text", "pass",
                "At least one alt text mentions the topic or is descriptive.", "bonus", 1,
            ))
        else:
            checks.append(make(
                "images-alt-keyword", "Descriptive alt text", "warning",
                "No alt text mentions the topic.", "bonus", 1,
                tip="Describe the main image with words related to the focus keyword.",
            ))

    if stats.total == 0:
        checks.append(make(
            "images-present", "Images", "warning", "The page has no image.", "important", 2,
            tip="Add at least one relevant image; pages with visuals hold attention longer.",
        ))
    else:
        checks.append(make(
            "images-present", "Images", "pass", f"The page has {stats.total} image(s).", "important", 2,
        ))

    if page.is_post:
        if stats.total >= 1:
            checks.append(make(
                "images-quantity", "Post images", "pass", "The post is illustrated.", "bonus", 1,
            ))
        else:
            checks.append(make(
                "images-quantity", "Post images", "fail", "The post has no image.", "important", 2,
                tip="Add a featured image; it is also used for social sharing.",
            ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_images, order=60)
