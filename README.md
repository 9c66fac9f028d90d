# phototool

Toolkit-free logic behind the review screens of a desktop photo library.

## Modules

- `phototool.errtext`: turns library and database failures into short messages a user can act on.
  - `user_facing_dialog_err_text(err)` covers error dialogs.
  - `user_facing_collection_write_err_text(err)` covers album create, update and link failures. It passes through validation lines such as `create collection: name is required`.
  - `library_err_text(err)` covers read failures.
  - `collection_store_err_text(err)` maps missing albums and foreign-key failures.
  - `user_facing_file_open_err_text(err)` covers file-picker failures.
  - `CollectionNotFoundError` is recognised anywhere in an exception's cause/context chain.
  - Every function returns `""` for `None`.
- `phototool.drops`: handles files dropped onto an upload area.
  - `classify_dropped_uris(uris, is_supported_ext, stat=os.stat)` returns a `DroppedPaths` with `supported` paths and human-readable `unsupported` lines. It skips duplicates. You supply `is_supported_ext`, which is called with an extension such as `".jpg"`.
  - Helpers: `uri_local_path`, which raises `ValueError` for non-local or empty URIs; `drop_reject_reason`; `drop_blocked_dialog_info`, which returns `(title, message)` or `None`; `dropped_skip_summary_for_dialog`, which caps the list at eight lines; `try_add_unique_path`; `take_pending`; `rect_contains_point`.
- `phototool.undo`: `RejectUndoStack` is a thread-safe LIFO of rejected asset ids.
  - It holds at most 128 ids by default and drops the oldest first.
  - `push` ignores ids that are not positive.
  - `pop` returns `None` when the stack is empty.
  - It also has `clear` and `len()`.
- `phototool.imaging`: image loading with Pillow.
  - `decode_image_file(path)` fully decodes JPEG, PNG or GIF. It raises `OSError` for anything else.
  - `pending_thumbnail_raster()` returns a shared 56×42 RGBA gradient placeholder.
- `phototool.grid`: state behind a four-column, 48-per-page thumbnail grid.
  - `PagedAssetGrid(fetch_page, total=0, on_selection_change=None, page_size=48)` loads pages lazily through `fetch_page(limit, offset)`.
  - A page that failed is remembered, and reading it raises `PageLoadError` until `reset` or `invalidate_pages` is called.
  - It tracks a bulk selection: `toggle_selected`, `clear_selected`, `is_selected`, `selected_asset_ids`.
  - `generation` increases on every reset or invalidation.
  - Helpers: `grid_list_row_count`, `rating_badge_text`, `reject_badge_label`, and the constants `APP_ID`, `MSG_PAGE_LOAD_FAIL`, `MSG_DECODE_FAIL`.
- `phototool.loupe`: single-photo loupe logic.
  - `loupe_step_index(idx, delta, total)` is prev/next stepping that clamps and never wraps.
  - `loupe_rating_key_allowed(asset_id)` reports whether a rating key should take effect.
- `phototool.loupe_layout`: `loupe_image_rect(width, height)` returns a centred `Rect` covering 24/25 of each dimension.
- `phototool.display_scale`: pure functions that classify display scaling into the 125% and 150% tiers and return a `ScaleResult(pct, detail, ok)`.
  - Windows: `windows_display_scaling(dpi)`.
  - macOS: `darwin_display_scaling(env, probe)`, where `probe` comes from `ui_probe_from_ratios(ratios)`, and `darwin_nocgo_display_scaling(env)`.
  - CI: `darwin_ci_surrogate(env)` reads the CI settings.
  - Other platforms: `unsupported_display_scaling()`.

## Install

```
pip install .
```

## Example

```python
from phototool.grid import PagedAssetGrid
from phototool.loupe import loupe_step_index

rows = [{"id": n} for n in range(1, 101)]
grid = PagedAssetGrid(fetch_page=lambda limit, offset: rows[offset:offset + limit])
grid.reset(len(rows))
grid.row_at(0)        # {"id": 1}
grid.row_count()      # 25

loupe_step_index(0, 1, total=3)   # (1, True)
loupe_step_index(2, 1, total=3)   # (2, False)
```

## What it does not do

- There is no user interface, no command-line tool and no database.
  - `PagedAssetGrid` gets its rows from whatever `fetch_page` you give it.
  - The error-copy functions only map exception text.
- It does not write thumbnails to a cache.
- It does not query the operating system for display scaling. You pass in the DPI or the pixel/point ratios yourself.

## Tests

```
pip install .[test]
pytest
```