"""Root test configuration: shared component sources and a throwaway docs site"""

import pytest

from mdxlive.config import Settings


BUTTON_TSX = """\
import React from 'react';

interface ButtonProps {
  variant?: 'default' | 'secondary' | 'destructive';
  size?: 'sm' | 'md' | 'lg';
  disabled?: boolean;
  loading?: boolean;
  children?: React.ReactNode;
}

const variantClasses = {
  default: 'bg-primary text-white',
  secondary: 'bg-secondary text-black',
  destructive: 'bg-red-600 text-white',
};

const sizeClasses = {
  sm: 'h-8 px-3 text-sm',
  md: 'h-10 px-4',
  lg: 'h-12 px-6 text-lg',
};

const baseClasses = 'inline-flex items-center ' + 'rounded-md font-medium';

export function Button({ variant = 'default', size = 'md', disabled, loading, children }: ButtonProps) {
  return <button className={baseClasses}>{children}</button>;
}
"""

BADGE_TSX = """\
type BadgeProps = {
  tone?: string;
  className?: string;
};

const variantClasses: Record<string, string> = {
  neutral: 'bg-gray-100',
  success: 'bg-green-100',
};

export const Badge = ({ tone, className }: BadgeProps) => null;
"""


@pytest.fixture(name="button_source")
def button_source_fixture():
    return BUTTON_TSX


@pytest.fixture(name="components_dir")
def components_dir_fixture(tmp_path):
    """Component tree with two real components plus files the registry must skip."""
    root = tmp_path / "components"
    (root / "ui").mkdir(parents=True)
    (root / "ui" / "Button.tsx").write_text(BUTTON_TSX)
    (root / "Badge.tsx").write_text(BADGE_TSX)
    (root / "Button.test.tsx").write_text(BUTTON_TSX.replace("Button", "TestButton"))
    (root / "Button.stories.tsx").write_text(BUTTON_TSX.replace("Button", "StoryButton"))
    (root / "index.tsx").write_text(BUTTON_TSX.replace("Button", "IndexButton"))
    (root / "utils.ts").write_text("export const cn = (...c: string[]) => c.join(' ');\n")
    (root / "Plain.tsx").write_text("export function Plain() { return null; }\n")
    return root


@pytest.fixture(name="make_settings")
def make_settings_fixture(tmp_path):
    """Settings rooted in tmp_path; keyword args override fields."""
    def _make(**kwargs) -> Settings:
        data = {
            "docs_dir": str(tmp_path / "docs"),
            "output_dir": str(tmp_path / "dist"),
            "max_workers": 2,
        }
        data.update(kwargs)
        return Settings(**data)
    return _make
