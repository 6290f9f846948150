"""Template Service - HTML rendering for the signature templates.

This module handles:
- Template A: branded signature with contact details, optional links,
  company boilerplate and a closing quote
- Template B: minimal greeting plus name

Interface Contract:
- render_template_a(profile, quote, branding) -> str
- render_template_b(profile) -> str
- Renderers are pure; all styling is inline so the fragment needs no stylesheet

Profile values are inserted as given. Callers handling untrusted input
must sanitize the profile before rendering.
"""

from __future__ import annotations

from dataclasses import dataclass

from set_signature.config import BRAND_NAME, BRAND_TAGLINE, COMPANY_ADDRESS, COMPANY_LINKS, COMPANY_NAME
from set_signature.models import UserProfile
from set_signature.services.fields import is_valid

SEPARATOR = " | "
LINE_BREAK = "<br/>"
NAME_DASH = "–"

DIVIDER = ":" * 71


@dataclass(frozen=True)
class Branding:
    """Fixed company boilerplate shown by the branded template."""
    brand_name: str = BRAND_NAME
    tagline: str = BRAND_TAGLINE
    company_name: str = COMPANY_NAME
    address: str = COMPANY_ADDRESS
    links: tuple[tuple[str, str], ...] = COMPANY_LINKS


def _link(href: str, label: str) -> str:
    return f'<a href="{href}">{label}</a>'


def render_greeting(profile: UserProfile) -> str:
    """Greeting followed by a line break, or "" when no greeting is set."""
    if is_valid(profile.greeting):
        return profile.greeting + LINE_BREAK
    return ""


def render_contact_line(profile: UserProfile) -> str:
    """Job title, optional landline and mail-to link."""
    parts = [profile.job_title]
    if is_valid(profile.phone):
        parts.append(f"Office landline: {profile.phone}")
    parts.append(_link(f"mailto:{profile.email}", profile.email))
    return SEPARATOR.join(parts)


def render_links_line(profile: UserProfile) -> str:
    """Blog, network and research links joined by single separators.

    Returns "" when none of the links is set so the caller can drop the line.
    """
    links = []
    if is_valid(profile.blog_link):
        links.append(_link(profile.blog_link, "My blog"))
    if is_valid(profile.linkedin_link):
        links.append(_link(profile.linkedin_link, "LinkedIn profile"))
    if is_valid(profile.follow_research_link):
        links.append(_link(profile.follow_research_link, "Follow my latest research"))
    return SEPARATOR.join(links)


def render_quote(quote: str | None) -> str:
    if not is_valid(quote):
        return ""
    return f'<p><span style="font-size:7.0pt;font-family:Arial,sans-serif">{quote}</span></p>'


def render_template_a(profile: UserProfile, quote: str | None = "", branding: Branding | None = None) -> str:
    """Render the branded signature.

    Args:
        profile: Signature owner's details
        quote: Already escaped closing quote, omitted when empty
        branding: Company boilerplate. If None, uses the configured defaults.

    Returns:
        str: HTML fragment
    """
    branding = branding or Branding()

    html = render_greeting(profile)
    html += '<div style="font:11px Arial, Verdana, sans-serif;color:#333">'
    html += f"<p>{DIVIDER}</p>"
    html += f'<p><strong><span style="font-size:12.25px">{branding.brand_name}</span></strong>{LINE_BREAK}'
    html += f'<span style="font:10px Arial, Verdana, sans-serif;color:#3BB982;">{branding.tagline}</span></p>'
    html += f"<p><strong>{profile.name}</strong>{LINE_BREAK}"
    html += render_contact_line(profile) + LINE_BREAK

    links_line = render_links_line(profile)
    if links_line:
        html += links_line + LINE_BREAK

    html += LINE_BREAK
    html += f"<strong>{branding.company_name}</strong>{LINE_BREAK}"
    html += branding.address + LINE_BREAK
    html += SEPARATOR.join(_link(url, label) for label, url in branding.links)
    html += "</p>"
    html += render_quote(quote)
    html += "</div>"
    return html


def render_template_b(profile: UserProfile) -> str:
    """Render the minimal signature: optional greeting, then a dash and the name."""
    return render_greeting(profile) + NAME_DASH + profile.name
