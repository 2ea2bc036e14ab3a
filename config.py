"""
Configuration Management
========================

Environment configuration for the University Assistant Intake Form.
Supports local development and Streamlit Cloud deployment.
"""

import os
from dataclasses import dataclass
from typing import Optional, Dict, Any


SUPPORTED_LANGUAGES = ("ar", "en")

DEFAULT_LOGO_URL = (
    "https://pub-cdn.sider.ai/u/U024HZ02YAN/web-coder/6978eb1c749110c6a258f1ff/"
    "resource/25925e48-22ad-4972-91d6-f1b01b109c99.png"
)


def _as_bool(value: Any, default: bool) -> bool:
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def _as_language(value: Any) -> str:
    language = str(value or '').strip().lower()
    return language if language in SUPPORTED_LANGUAGES else 'ar'


@dataclass
class Config:
    """Application configuration"""

    # Logging
    log_level: str = "INFO"

    # Display
    default_language: str = "ar"
    logo_url: str = DEFAULT_LOGO_URL
    brand_name: str = "OverZaki"

    # Print / PDF
    enable_pdf_export: bool = True
    enable_browser_print: bool = True
    pdf_font_path: str = ""
    pdf_font_bold_path: str = ""

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables"""
        return cls(
            # Logging
            log_level=os.getenv('LOG_LEVEL', cls.log_level).upper(),

            # Display
            default_language=_as_language(os.getenv('DEFAULT_LANGUAGE', 'ar')),
            logo_url=os.getenv('LOGO_URL', DEFAULT_LOGO_URL),
            brand_name=os.getenv('BRAND_NAME', cls.brand_name),

            # Print / PDF
            enable_pdf_export=_as_bool(os.getenv('ENABLE_PDF_EXPORT'), True),
            enable_browser_print=_as_bool(os.getenv('ENABLE_BROWSER_PRINT'), True),
            pdf_font_path=os.getenv('PDF_FONT_PATH', ''),
            pdf_font_bold_path=os.getenv('PDF_FONT_BOLD_PATH', ''),
        )

    @classmethod
    def from_streamlit_secrets(cls) -> 'Config':
        """Load configuration from Streamlit secrets, environment as fallback"""
        try:
            import streamlit as st

            env = cls.from_env()
            return cls(
                log_level=str(st.secrets.get('LOG_LEVEL', env.log_level)).upper(),

                default_language=_as_language(st.secrets.get('DEFAULT_LANGUAGE', env.default_language)),
                logo_url=st.secrets.get('LOGO_URL', env.logo_url),
                brand_name=st.secrets.get('BRAND_NAME', env.brand_name),

                enable_pdf_export=_as_bool(st.secrets.get('ENABLE_PDF_EXPORT'), env.enable_pdf_export),
                enable_browser_print=_as_bool(st.secrets.get('ENABLE_BROWSER_PRINT'), env.enable_browser_print),
                pdf_font_path=st.secrets.get('PDF_FONT_PATH', env.pdf_font_path),
                pdf_font_bold_path=st.secrets.get('PDF_FONT_BOLD_PATH', env.pdf_font_bold_path),
            )
        except Exception:
            return cls.from_env()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (paths reduced to presence flags)"""
        return {
            'log_level': self.log_level,
            'default_language': self.default_language,
            'logo_url': self.logo_url,
            'brand_name': self.brand_name,
            'enable_pdf_export': self.enable_pdf_export,
            'enable_browser_print': self.enable_browser_print,
            'has_pdf_font': bool(self.pdf_font_path),
        }


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance"""
    global _config
    if _config is None:
        # Try Streamlit secrets first, then environment
        try:
            _config = Config.from_streamlit_secrets()
        except Exception:
            _config = Config.from_env()
    return _config


def reload_config():
    """Reload configuration from environment"""
    global _config
    _config = None
    return get_config()
