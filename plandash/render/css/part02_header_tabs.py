# plandash/render/css/part02_header_tabs.py
from __future__ import annotations

CSS_PART = r'''  header {
    margin-bottom: 32px;
    padding-bottom: 16px;
    border-bottom: 1px solid var(--border-color);
  }
  header h1 {
    font-size: 24px;
    font-weight: 600;
    margin-bottom: 8px;
  }
  .project-meta {
    display: flex;
    flex-wrap: wrap;
    gap: 24px;
    color: var(--text-secondary);
    font-size: 14px;
  }
  .project-meta span {
    display: flex;
    align-items: center;
    gap: 6px;
  }

  .stats {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(150px, 1fr));
    gap: 16px;
    margin-bottom: 24px;
  }
  .stat-card {
    background: var(--bg-secondary);
    border-radius: 8px;
    padding: 16px;
    text-align: center;
  }
  .stat-value {
    font-size: 32px;
    font-weight: 600;
    color: var(--accent-blue);
  }
  .stat-label {
    font-size: 12px;
    color: var(--text-secondary);
    margin-top: 4px;
  }
  .stat-card.warning .stat-value { color: var(--accent-yellow); }
  .stat-card.danger .stat-value { color: var(--accent-red); }
  .stat-card.success .stat-value { color: var(--accent-green); }

  .tabs {
    display: flex;
    gap: 8px;
    margin-bottom: 24px;
    border-bottom: 1px solid var(--border-color);
  }
  .tab {
    padding: 12px 16px;
    background: none;
    border: none;
    color: var(--text-secondary);
    font-size: 14px;
    cursor: pointer;
    border-bottom: 2px solid transparent;
    margin-bottom: -1px;
    transition: all 0.2s;
  }
  .tab:hover { color: var(--text-primary); }
  .tab.active {
    color: var(--text-primary);
    border-bottom-color: var(--accent-blue);
  }
  .tab-content { display: none; }
  .tab-content.active { display: block; }'''
