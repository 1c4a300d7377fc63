from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, override_settings

from . import conf
from .filtering import (
    ALL_AISLES,
    BinQuery,
    SortDirection,
    SortKey,
    StatusFilter,
    filter_bins,
    next_sort,
    page_window,
    paginate,
    query_table,
    sort_bins,
)
from .hierarchy import (
    aisle_options,
    build_zone_layout,
    limit_racks,
    rack_group,
    split_racks,
)
from .labels import describe_label, rack_key, split_label
from .metrics import (
    bin_status,
    percent_of,
    summarize_bins,
    summarize_warehouse,
    summarize_zone,
    utilization_segments,
)
from .records import (
    Bin,
    ZoneType,
    bin_from_mapping,
    bins_from_payload,
    warehouse_from_mapping,
    with_stock_counts,
    zone_from_mapping,
)
from .serializers import serialize_bin, serialize_grid, serialize_table


def make_bin(label, row=None, shelf=None, position=None, **kwargs):
    kwargs.setdefault('id', label)
    return Bin(label=label, row=row, shelf=shelf, position=position, **kwargs)


def rack_bins():
    """Aisle A with racks 01 and 02, two shelves each."""
    return [
        make_bin('A-01-01-01', 'A', '01', '01'),
        make_bin('A-02-01-01', 'A', '01', '02'),
        make_bin('A-01-02-01', 'A', '02', '01'),
        make_bin('A-02-02-01', 'A', '02', '02'),
        make_bin('A-02-03-01', 'A', '03', '01'),
    ]


class LabelTests(SimpleTestCase):
    def test_rack_key_is_second_token(self):
        self.assertEqual(rack_key('A-02-03-01'), '02')
        self.assertEqual(rack_key('A-02'), '02')

    def test_rack_key_missing_for_short_labels(self):
        self.assertIsNone(rack_key(''))
        self.assertIsNone(rack_key(None))
        self.assertIsNone(rack_key('DOCK1'))

    def test_rack_key_ignores_extra_tokens(self):
        self.assertEqual(rack_key('A-07-03-01-X-Y'), '07')

    def test_custom_separator(self):
        self.assertEqual(rack_key('A.02.03', separator='.'), '02')

    def test_split_label(self):
        parts = split_label('B-03-02-04')
        self.assertEqual((parts.aisle, parts.rack, parts.shelf, parts.position), ('B', '03', '02', '04'))
        self.assertIsNone(split_label('B-02-04').rack)
        self.assertIsNone(split_label('B-02'))

    def test_describe_label(self):
        self.assertEqual(describe_label('A-02-03-01'), 'Aisle A · Rack 02 · Shelf 03 · Pos 01')
        self.assertEqual(describe_label('A-03-01'), 'Row A · Shelf 03 · Pos 01')
        self.assertEqual(describe_label('DOCK'), 'DOCK')


class RecordTests(SimpleTestCase):
    def test_bin_from_mapping_reads_api_keys(self):
        b = bin_from_mapping({
            'id': 7, 'label': 'A-01-01-01', 'row': 'A', 'shelf': '01',
            'position': '', 'capacity': 5, 'isActive': False, '_stockCount': 3,
        })
        self.assertEqual(b.id, 7)
        self.assertIsNone(b.position)
        self.assertEqual(b.capacity, 5)
        self.assertFalse(b.is_active)
        self.assertEqual(b.stock_count, 3)

    def test_bin_from_mapping_defaults(self):
        b = bin_from_mapping({'id': 1, 'label': 'X'})
        self.assertTrue(b.is_active)
        self.assertEqual(b.stock_count, 0)
        self.assertIsNone(b.capacity)
        self.assertFalse(b.is_grouped)

    def test_negative_stock_clamped(self):
        with self.assertLogs('bin_layout.records', level='WARNING'):
            b = bin_from_mapping({'id': 1, 'label': 'X', '_stockCount': 'lots'})
        self.assertEqual(b.stock_count, 0)
        self.assertEqual(bin_from_mapping({'id': 1, 'label': 'X', '_stockCount': -4}).stock_count, 0)

    def test_infinite_numbers_degrade_to_zero(self):
        with self.assertLogs('bin_layout.records', level='WARNING'):
            b = bin_from_mapping({
                'id': 1, 'label': 'A-01', 'stockCount': float('inf'), 'capacity': float('-inf'),
            })
        self.assertEqual(b.stock_count, 0)
        self.assertEqual(b.capacity, 0)
        zone = zone_from_mapping({'id': 1, 'name': 'Z', 'bins': [
            {'id': 1, 'label': 'A-01', '_stockCount': float('inf')},
            {'id': 2, 'label': 'A-02', '_stockCount': 2},
        ]})
        self.assertEqual([b.stock_count for b in zone.bins], [0, 2])

    def test_flag_strings_are_not_inverted(self):
        self.assertFalse(bin_from_mapping({'id': 1, 'label': 'X', 'isActive': 'false'}).is_active)
        self.assertFalse(bin_from_mapping({'id': 1, 'label': 'X', 'isActive': '0'}).is_active)
        self.assertFalse(bin_from_mapping({'id': 1, 'label': 'X', 'isActive': 0}).is_active)
        self.assertTrue(bin_from_mapping({'id': 1, 'label': 'X', 'isActive': 'True'}).is_active)
        self.assertFalse(bin_from_mapping({'id': 1, 'label': 'X', 'pickable': 'no'}).pickable)
        with self.assertLogs('bin_layout.records', level='WARNING'):
            b = bin_from_mapping({'id': 1, 'label': 'X', 'sellable': 'maybe'})
        self.assertTrue(b.sellable)

    def test_missing_label_raises(self):
        with self.assertRaises(ValueError):
            bin_from_mapping({'id': 1})
        with self.assertRaises(ValueError):
            bin_from_mapping({'label': 'A-01'})

    def test_with_stock_counts_returns_new_records(self):
        bins = (make_bin('A-01', id=1), make_bin('A-02', id=2))
        annotated = with_stock_counts(bins, {1: 4})
        self.assertEqual([b.stock_count for b in annotated], [4, 0])
        self.assertEqual([b.stock_count for b in bins], [0, 0])

    def test_zone_type_coercion(self):
        zone = zone_from_mapping({'id': 1, 'name': 'Z', 'type': 'picking', 'bins': [{'id': 1, 'label': 'A'}]})
        self.assertIs(zone.type, ZoneType.PICKING)
        self.assertEqual(len(zone.bins), 1)
        self.assertIs(ZoneType.coerce('MEZZANINE'), ZoneType.STORAGE)
        self.assertIs(ZoneType.coerce(None), ZoneType.STORAGE)
        self.assertTrue(ZoneType.RETURNS.hint)


class HierarchyTests(SimpleTestCase):
    def test_concrete_scenario(self):
        bins = bins_from_payload([
            {'id': 1, 'label': 'A-01-01-01', 'row': 'A', 'shelf': '01', 'position': '01', '_stockCount': 3, 'capacity': 5},
            {'id': 2, 'label': 'A-01-01-02', 'row': 'A', 'shelf': '01', 'position': '02', '_stockCount': 0, 'capacity': 5},
            {'id': 3, 'label': 'A-02-01-01', 'row': 'A', 'shelf': '02', 'position': '01', '_stockCount': 6, 'capacity': 5},
        ])
        layout = build_zone_layout(bins)

        self.assertEqual([a.row for a in layout.aisles], ['A'])
        self.assertEqual([s.shelf for s in layout.aisles[0].shelves], ['02', '01'])
        stats = summarize_bins(bins)
        self.assertEqual(stats.total_bins, 3)
        self.assertEqual(stats.occupied_bins, 2)
        self.assertEqual(stats.utilization_pct, 67)
        self.assertTrue(bin_status(bins[2]).is_over_capacity)

    def test_shelves_descending(self):
        bins = [make_bin(f'A-01-{s}-01', 'A', s, '01') for s in ('01', '03', '02')]
        layout = build_zone_layout(bins)
        self.assertEqual([s.shelf for s in layout.aisles[0].shelves], ['03', '02', '01'])

    def test_aisles_ascending(self):
        bins = [make_bin('C-1', 'C', '1'), make_bin('A-1', 'A', '1'), make_bin('B-1', 'B', '1')]
        self.assertEqual([a.row for a in build_zone_layout(bins).aisles], ['A', 'B', 'C'])

    def test_positions_sort_as_strings(self):
        bins = [
            make_bin('A-01-01-10', 'A', '01', '10'),
            make_bin('A-01-01-9', 'A', '01', '9'),
            make_bin('A-01-01-02', 'A', '01', '02'),
        ]
        shelf = build_zone_layout(bins).aisles[0].shelves[0]
        self.assertEqual([b.position for b in shelf.bins], ['02', '10', '9'])

    def test_equal_positions_keep_input_order(self):
        first = make_bin('A-01-01-01a', 'A', '01', '01')
        second = make_bin('A-01-01-01b', 'A', '01', '01')
        shelf = build_zone_layout([first, second]).aisles[0].shelves[0]
        self.assertEqual(shelf.bins, (first, second))

    def test_missing_position_sorts_first(self):
        bins = [make_bin('A-01-01-01', 'A', '01', '01'), make_bin('A-01-01', 'A', '01')]
        shelf = build_zone_layout(bins).aisles[0].shelves[0]
        self.assertEqual([b.label for b in shelf.bins], ['A-01-01', 'A-01-01-01'])

    def test_partition_is_complete(self):
        bins = rack_bins() + [
            make_bin('LOOSE-1'),
            make_bin('B-01', row='B'),
            make_bin('X-01', shelf='01'),
        ]
        layout = build_zone_layout(bins)
        grouped = [b for aisle in layout.aisles for b in aisle.bins]

        self.assertEqual([b.label for b in layout.ungrouped], ['LOOSE-1', 'B-01', 'X-01'])
        self.assertEqual(len(grouped) + len(layout.ungrouped), len(bins))
        self.assertEqual(set(grouped) | set(layout.ungrouped), set(bins))
        self.assertFalse(set(grouped) & set(layout.ungrouped))

    def test_rack_keys(self):
        bins = rack_bins() + [make_bin('BAD', 'A', '01', '03')]
        aisle = build_zone_layout(bins).aisles[0]
        self.assertEqual(aisle.rack_keys, ('01', '02'))

    def test_deterministic(self):
        bins = rack_bins() + [make_bin('LOOSE')]
        self.assertEqual(build_zone_layout(bins), build_zone_layout(bins))
        self.assertEqual(serialize_grid(build_zone_layout(bins)), serialize_grid(build_zone_layout(bins)))

    def test_empty_input(self):
        layout = build_zone_layout([])
        self.assertEqual(layout.aisles, ())
        self.assertEqual(layout.ungrouped, ())

    def test_source_list_untouched(self):
        bins = list(reversed(rack_bins()))
        snapshot = list(bins)
        build_zone_layout(bins)
        self.assertEqual(bins, snapshot)

    def test_empty_row_or_shelf_is_ungrouped(self):
        bins = [make_bin('E-1', '', '01'), make_bin('E-2', 'A', ''), make_bin('A-1', 'A', '01')]
        layout = build_zone_layout(bins)
        self.assertEqual([a.row for a in layout.aisles], ['A'])
        self.assertEqual([b.label for b in layout.ungrouped], ['E-1', 'E-2'])
        self.assertEqual(tuple(a.row for a in layout.aisles), aisle_options(bins))

    def test_aisle_lookup_and_options(self):
        bins = rack_bins() + [make_bin('B-1', 'B', '1'), make_bin('C-1', 'C')]
        layout = build_zone_layout(bins)
        self.assertEqual(layout.aisle('A').row, 'A')
        self.assertIsNone(layout.aisle('Z'))
        self.assertEqual(aisle_options(bins), ('A', 'B', 'C'))


class RackSplitTests(SimpleTestCase):
    def setUp(self):
        self.aisle = build_zone_layout(rack_bins()).aisles[0]

    def test_rack_group_keeps_shelf_order(self):
        rack = rack_group(self.aisle, '02')
        self.assertEqual([s.shelf for s in rack.shelves], ['03', '02', '01'])
        self.assertEqual([b.label for b in rack.bins], ['A-02-03-01', 'A-02-02-01', 'A-02-01-01'])

    def test_rack_group_omits_empty_shelves(self):
        rack = rack_group(self.aisle, '01')
        self.assertEqual([s.shelf for s in rack.shelves], ['02', '01'])

    def test_rack_group_without_matches(self):
        self.assertIsNone(rack_group(self.aisle, '09'))

    def test_split_racks_multiple(self):
        racks = split_racks(self.aisle)
        self.assertEqual([r.rack_key for r in racks], ['01', '02'])

    def test_split_racks_single_rack_is_not_split(self):
        bins = [make_bin('A-01-01-01', 'A', '01', '01'), make_bin('A-01-02-01', 'A', '02', '01')]
        aisle = build_zone_layout(bins).aisles[0]
        racks = split_racks(aisle)
        self.assertEqual(len(racks), 1)
        self.assertEqual(racks[0].rack_key, '01')
        self.assertEqual(racks[0].shelves, aisle.shelves)

    def test_split_racks_without_rack_keys(self):
        aisle = build_zone_layout([make_bin('X', 'A', '01')]).aisles[0]
        racks = split_racks(aisle)
        self.assertEqual(len(racks), 1)
        self.assertIsNone(racks[0].rack_key)

    def test_short_labels_kept_when_splitting(self):
        bins = rack_bins() + [make_bin('SPARE', 'A', '01', '09')]
        racks = split_racks(build_zone_layout(bins).aisles[0])
        self.assertEqual([r.rack_key for r in racks], ['01', '02', None])
        self.assertEqual([b.label for b in racks[-1].bins], ['SPARE'])

    def test_limit_racks(self):
        racks = tuple(rack_group(self.aisle, key) for key in ('01', '02')) * 4
        window = limit_racks(racks, 5)
        self.assertEqual(len(window.visible), 5)
        self.assertEqual(window.hidden_count, 3)
        self.assertTrue(window.has_more)

        expanded = limit_racks(racks, 5, expanded=True)
        self.assertEqual(len(expanded.visible), 8)
        self.assertFalse(expanded.has_more)

    def test_limit_racks_uses_configured_default(self):
        racks = split_racks(self.aisle) * 3
        self.assertEqual(len(limit_racks(racks).visible), 5)
        with override_settings(BIN_LAYOUT={'RACK_DISPLAY_LIMIT': 2}):
            self.assertEqual(len(limit_racks(racks).visible), 2)

    def test_limit_racks_rejects_bad_limit(self):
        for limit in (0, -1, 2.5, True):
            with self.assertRaises(ValueError):
                limit_racks((), limit)


class MetricsTests(SimpleTestCase):
    def test_overflow_flag(self):
        self.assertTrue(bin_status(make_bin('A', capacity=5, stock_count=6)).is_over_capacity)
        self.assertFalse(bin_status(make_bin('A', capacity=0, stock_count=6)).is_over_capacity)
        self.assertFalse(bin_status(make_bin('A', stock_count=6)).is_over_capacity)
        self.assertFalse(bin_status(make_bin('A', capacity=5, stock_count=5)).is_over_capacity)

    def test_bin_status_flags(self):
        status = bin_status(make_bin('A', capacity=8, is_active=False))
        self.assertTrue(status.is_empty)
        self.assertTrue(status.is_inactive)
        self.assertEqual(status.fill_pct, 0)
        self.assertIsNone(bin_status(make_bin('A', stock_count=3)).fill_pct)

    def test_empty_collection(self):
        stats = summarize_bins([])
        self.assertEqual(stats.total_bins, 0)
        self.assertEqual(stats.utilization_pct, 0)

    def test_empty_bins_exclude_inactive(self):
        bins = [
            make_bin('A', stock_count=2),
            make_bin('B'),
            make_bin('C', is_active=False),
            make_bin('D', stock_count=1, is_active=False),
        ]
        stats = summarize_bins(bins)
        self.assertEqual(stats.occupied_bins, 2)
        self.assertEqual(stats.empty_bins, 1)
        self.assertEqual(stats.inactive_bins, 2)
        self.assertEqual(stats.total_items, 3)
        self.assertEqual(stats.utilization_pct, 50)
        self.assertEqual(
            utilization_segments(stats),
            (('occupied', 2), ('empty', 1), ('inactive', 1)),
        )

    def test_utilization_rounds_half_up(self):
        self.assertEqual(percent_of(1, 8), 13)
        self.assertEqual(percent_of(1, 3), 33)
        self.assertEqual(percent_of(2, 3), 67)
        self.assertEqual(percent_of(5, 0), 0)

    def test_zone_and_warehouse_rollups(self):
        warehouse = warehouse_from_mapping({
            'id': 1,
            'name': 'Main',
            'zones': [
                {'id': 1, 'name': 'Z1', 'type': 'STORAGE', 'bins': [
                    {'id': 1, 'label': 'A', '_stockCount': 1},
                    {'id': 2, 'label': 'B', 'isActive': False},
                ]},
                {'id': 2, 'name': 'Z2', 'type': 'PICKING', 'bins': [
                    {'id': 3, 'label': 'C', '_stockCount': 2, 'capacity': 1},
                ]},
            ],
        })
        self.assertEqual(summarize_zone(warehouse.zones[0]).empty_bins, 0)

        stats = summarize_warehouse([warehouse])
        self.assertEqual(stats.total_bins, 3)
        self.assertEqual(stats.occupied_bins, 2)
        self.assertEqual(stats.empty_bins, 1)
        self.assertEqual(stats.over_capacity_bins, 1)
        self.assertEqual(stats.utilization_pct, 67)

    def test_stats_independent_of_filter(self):
        bins = rack_bins()
        filtered = filter_bins(bins, BinQuery(search='A-01'))
        self.assertEqual(summarize_bins(bins).total_bins, 5)
        self.assertEqual(len(filtered), 2)


class FilterTests(SimpleTestCase):
    def setUp(self):
        self.bins = [
            make_bin('A-01-01-01', 'A', '01', '01', stock_count=3),
            make_bin('A-01-02-01', 'A', '02', '01'),
            make_bin('B-01-01-01', 'B', '01', '01', stock_count=1, is_active=False),
            make_bin('B-01-02-01', 'B', '02', '01'),
            make_bin('shelf-spare', 'A', '03', '01'),
        ]

    def labels(self, bins):
        return [b.label for b in bins]

    def test_search_is_case_insensitive(self):
        result = filter_bins(self.bins, BinQuery(search='SHELF'))
        self.assertEqual(self.labels(result), ['shelf-spare'])

    def test_blank_search_matches_all(self):
        self.assertEqual(len(filter_bins(self.bins, BinQuery(search='   '))), 5)

    def test_aisle_filter(self):
        result = filter_bins(self.bins, BinQuery(aisle='B'))
        self.assertEqual(self.labels(result), ['B-01-01-01', 'B-01-02-01'])
        self.assertEqual(len(filter_bins(self.bins, BinQuery(aisle=ALL_AISLES))), 5)

    def test_status_filters(self):
        self.assertEqual(self.labels(filter_bins(self.bins, BinQuery(status=StatusFilter.OCCUPIED))), ['A-01-01-01'])
        self.assertEqual(
            self.labels(filter_bins(self.bins, BinQuery(status='EMPTY'))),
            ['A-01-02-01', 'B-01-02-01', 'shelf-spare'],
        )
        self.assertEqual(self.labels(filter_bins(self.bins, BinQuery(status='inactive'))), ['B-01-01-01'])

    def test_unknown_status_raises(self):
        with self.assertRaises(ValueError):
            filter_bins(self.bins, BinQuery(status='full'))

    def test_composition_matches_sequential_filters(self):
        stepwise = filter_bins(filter_bins(self.bins, BinQuery(aisle='A')), BinQuery(search='shelf'))
        combined = filter_bins(self.bins, BinQuery(search='shelf', aisle='A'))
        self.assertEqual(stepwise, combined)


class SortTests(SimpleTestCase):
    def setUp(self):
        self.bins = [
            make_bin('C', 'B', '02', '1', stock_count=5),
            make_bin('A', None, '01', None, stock_count=0, is_active=False),
            make_bin('B', 'A', None, '2', stock_count=5),
            make_bin('D', 'A', '02', '10', stock_count=1),
        ]

    def labels(self, bins):
        return [b.label for b in bins]

    def test_label_sort(self):
        self.assertEqual(self.labels(sort_bins(self.bins, 'label')), ['A', 'B', 'C', 'D'])
        self.assertEqual(self.labels(sort_bins(self.bins, 'label', 'desc')), ['D', 'C', 'B', 'A'])

    def test_missing_values_sort_first(self):
        self.assertEqual(self.labels(sort_bins(self.bins, SortKey.ROW)), ['A', 'B', 'D', 'C'])
        self.assertEqual(self.labels(sort_bins(self.bins, SortKey.SHELF)), ['B', 'A', 'C', 'D'])
        self.assertEqual(self.labels(sort_bins(self.bins, SortKey.POSITION)), ['A', 'C', 'D', 'B'])

    def test_stock_sort_is_numeric_and_stable(self):
        self.assertEqual(self.labels(sort_bins(self.bins, 'stock')), ['A', 'D', 'C', 'B'])
        self.assertEqual(self.labels(sort_bins(self.bins, 'stock', SortDirection.DESC)), ['C', 'B', 'D', 'A'])

    def test_status_sort_inactive_first(self):
        self.assertEqual(self.labels(sort_bins(self.bins, 'status')), ['A', 'C', 'B', 'D'])

    def test_sort_idempotent(self):
        once = sort_bins(self.bins, 'stock')
        self.assertEqual(sort_bins(once, 'stock'), once)

    def test_invalid_sort_arguments(self):
        with self.assertRaises(ValueError):
            sort_bins(self.bins, 'weight')
        with self.assertRaises(ValueError):
            sort_bins(self.bins, 'label', 'sideways')

    def test_next_sort(self):
        self.assertEqual(next_sort('label', 'asc', 'label'), (SortKey.LABEL, SortDirection.DESC))
        self.assertEqual(next_sort('label', 'desc', 'label'), (SortKey.LABEL, SortDirection.ASC))
        self.assertEqual(next_sort('label', 'desc', 'stock'), (SortKey.STOCK, SortDirection.ASC))


class PaginationTests(SimpleTestCase):
    def setUp(self):
        self.bins = [make_bin(f'A-{i:02d}') for i in range(30)]

    def test_default_page_size(self):
        page = paginate(self.bins)
        self.assertEqual(page.page_size, 25)
        self.assertEqual(page.pages, 2)
        self.assertEqual(len(page.items), 25)
        self.assertEqual((page.first_item, page.last_item), (1, 25))
        self.assertTrue(page.has_next)
        self.assertFalse(page.has_previous)

    def test_out_of_range_page_clamps_to_last(self):
        page = paginate(self.bins, 10)
        self.assertEqual(page.page, 1)
        self.assertEqual(page.items, tuple(self.bins[25:]))
        self.assertEqual((page.first_item, page.last_item), (26, 30))

    def test_negative_page_clamps_to_first(self):
        self.assertEqual(paginate(self.bins, -3).page, 0)

    def test_empty_result(self):
        page = paginate([], 4)
        self.assertEqual((page.page, page.pages, page.total), (0, 0, 0))
        self.assertEqual(page.items, ())
        self.assertEqual(page.first_item, 0)

    def test_invalid_page_size(self):
        for size in (0, -5, 2.0, True):
            with self.assertRaises(ValueError):
                paginate(self.bins, 0, size)

    @override_settings(BIN_LAYOUT={'TABLE_PAGE_SIZE': 10})
    def test_configured_page_size(self):
        self.assertEqual(paginate(self.bins).pages, 3)

    def test_page_window(self):
        self.assertEqual(page_window(0, 3), (0, 1, 2))
        self.assertEqual(page_window(1, 20), (0, 1, 2, 3, 4, 5, 6))
        self.assertEqual(page_window(10, 20), (7, 8, 9, 10, 11, 12, 13))
        self.assertEqual(page_window(18, 20), (13, 14, 15, 16, 17, 18, 19))

    def test_query_table(self):
        bins = [make_bin(f'A-{i:02d}', 'A', stock_count=i % 2) for i in range(12)]
        page = query_table(bins, BinQuery(status='occupied'), 'label', 'desc', page=5, page_size=4)
        self.assertEqual(page.total, 6)
        self.assertEqual(page.page, 1)
        self.assertEqual([b.label for b in page.items], ['A-03', 'A-01'])


class ConfigTests(SimpleTestCase):
    def test_defaults(self):
        self.assertEqual(conf.get_effective_settings(), {'TABLE_PAGE_SIZE': 25, 'RACK_DISPLAY_LIMIT': 5})

    def test_override_priority(self):
        with override_settings(BIN_LAYOUT={'TABLE_PAGE_SIZE': 50}):
            self.assertEqual(conf.table_page_size(), 50)
            self.assertEqual(conf.table_page_size({'TABLE_PAGE_SIZE': 10}), 10)
            self.assertEqual(conf.table_page_size({'TABLE_PAGE_SIZE': None}), 50)

    @override_settings(BIN_LAYOUT={'RACK_DISPLAY_LIMIT': 0})
    def test_invalid_value_rejected(self):
        with self.assertRaisesMessage(ValidationError, 'RACK_DISPLAY_LIMIT'):
            conf.rack_display_limit()

    def test_unregistered_key(self):
        with self.assertRaises(ValidationError):
            conf.get_effective_setting('COLUMNS')


class SerializerTests(SimpleTestCase):
    def test_serialize_bin(self):
        data = serialize_bin(make_bin('A-02-03-01', 'A', '03', '01', capacity=4, stock_count=5))
        self.assertEqual(data['description'], 'Aisle A · Rack 02 · Shelf 03 · Pos 01')
        self.assertTrue(data['isOverCapacity'])
        self.assertEqual(data['fillPct'], 125)

    def test_serialize_grid(self):
        bins = rack_bins() + [make_bin('LOOSE')]
        data = serialize_grid(build_zone_layout(bins), zone_type='PICKING', rack_limit=1)
        aisle = data['aisles'][0]

        self.assertEqual(data['zoneType'], 'PICKING')
        self.assertEqual(aisle['rackKeys'], ['01', '02'])
        self.assertEqual([r['rackKey'] for r in aisle['racks']], ['01'])
        self.assertEqual(aisle['hiddenRacks'], 1)
        self.assertEqual(aisle['stats']['totalBins'], 5)
        self.assertEqual([b['label'] for b in data['ungrouped']], ['LOOSE'])

        expanded = serialize_grid(build_zone_layout(bins), rack_limit=1, expanded_aisles={'A'})
        self.assertEqual(len(expanded['aisles'][0]['racks']), 2)

    def test_serialize_table(self):
        page = paginate([make_bin(f'A-{i}') for i in range(3)], 0, 2)
        data = serialize_table(page)
        self.assertEqual(data['showing'], {'from': 1, 'to': 2})
        self.assertEqual(data['pageWindow'], [0, 1])
        self.assertEqual(data['total'], 3)
        self.assertTrue(data['hasNext'])
